# src/syncconf/core/config/loader.py
"""
Loader canônico de configuração do SyncConf.

A configuração do engine é resolvida a partir de:
    - um arquivo de defaults (opcional; sem ele, valem os defaults
      embutidos de `EngineSettings`)
    - um arquivo local de overrides (opcional)

Princípios fundamentais:
    - Configuração é declarativa e explícita
    - Erros estruturais são falhas fatais, levantadas antes da resolução
      de qualquer catálogo
    - A mesma entrada sempre produz a mesma configuração final

Invariantes:
    - O resultado é sempre um dicionário puro (`dict`)
    - Overrides nunca mutam os defaults

Limites explícitos:
    - Não interpreta settings (responsabilidade de `EngineSettings`)
    - Não persiste configuração
"""

from pathlib import Path
from typing import Any, Dict, Optional
import json

import yaml  # PyYAML

from .merge import deep_merge
from .errors import (
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de configuração e valida sua estrutura básica.

    Decisões arquiteturais:
        - Arquivos vazios são interpretados como dicionários vazios
        - O conteúdo raiz deve ser um dicionário

    Raises:
        DefaultsNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise DefaultsNotFoundError(f"Arquivo de configuração não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def load_config(
    *,
    defaults_path: Optional[str] = None,
    local_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Carrega e resolve a configuração efetiva do engine.

    Política de resolução:
        - defaults, quando informados, são obrigatórios
        - o arquivo local é opcional e ignorado quando não existe
        - quando presente, o local tem prioridade via `deep_merge`

    Args:
        defaults_path (Optional[str]): Caminho para o arquivo base.
        local_path (Optional[str]): Caminho opcional para overrides locais.

    Returns:
        Dict[str, Any]: Configuração final resolvida.

    Raises:
        DefaultsNotFoundError: Se o arquivo de defaults não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
        ConfigTypeConflictError: Se ocorrer conflito estrutural durante o merge.
    """
    effective: Dict[str, Any] = {}

    if defaults_path is not None:
        effective = _load_file(Path(defaults_path))

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(effective, _load_file(local_file))

    return effective
