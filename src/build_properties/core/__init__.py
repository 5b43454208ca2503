# src/build_properties/core/__init__.py
"""
Core do Build Properties.

Este pacote contém a implementação canônica do ciclo de vida das
propriedades de um build, independente de como elas são lidas.

Componentes principais:
    - properties     → estado (Unloaded/Loaded), controller, handle estável,
                       projeção de system properties
    - config         → settings da biblioteca (YAML/JSON, deep-merge)
    - logging_config → handler de log do pacote

Princípios fundamentais:
    - Load único e explícito; reloads são no-op
    - Uso antes do load é erro fatal, nunca resultado vazio
    - Estado global do processo só é escrito na projeção do load

Limites explícitos:
    - Não lê arquivos de propriedades
    - Não descobre o layout do build
    - Não define precedência entre fontes de propriedades
"""
