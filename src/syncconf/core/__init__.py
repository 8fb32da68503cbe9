"""
Core do SyncConf.

Este pacote reúne o engine de resolução e validação de configuração de
sincronização entre um catálogo descoberto e um destino.

O core é projetado para ser:
    - determinístico
    - testável de forma isolada
    - livre de I/O nas operações de resolução e validação
    - orientado a contratos explícitos

Componentes principais:
    - catalog    → tipos do catálogo, capacidades do destino, loaders
    - resolver   → negociação de modos de sync e normalização do catálogo
    - validation → ruleset da conexão editada (violações como dados)
    - operations → operações pós-carga e merge ordenado
    - connection → agregado de configuração de conexão
    - session    → estado inicial e sessão de edição
    - config     → settings do engine, deep-merge e hashing

Limites explícitos:
    - Não executa discovery nem syncs
    - Não depende de UI ou transporte de rede
"""
