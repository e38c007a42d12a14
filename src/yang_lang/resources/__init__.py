"""Recursos empacotados do yang-lang (defaults de configuração)."""
