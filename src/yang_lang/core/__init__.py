"""
Core do yang-lang.

Este pacote reúne os quatro componentes de transformação de dados
estruturados através de uma fronteira:

    - keys    → namespace de chaves (QualifiedKey, extract/group/strip)
    - merge   → deep-merge com combiner do chamador
    - codec   → texto canônico + gzip round-trip
    - futures → handle bloqueante → futuro composável

e a pilha ambiente compartilhada:

    - config     → Settings tipados (defaults empacotados + overrides)
    - errors     → ErrorPayload serializável
    - exceptions → raiz da hierarquia de exceções

Princípios fundamentais:
    - Nenhum estado mutável compartilhado entre componentes
    - Nada é impresso; falhas são propagadas ou carregadas como dado
"""
