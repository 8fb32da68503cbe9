"""Loader canônico de catálogo e de capacidades do destino (YAML/JSON).

Notas:
- O documento já foi produzido pelo colaborador de discovery; aqui ele é
  apenas lido e validado estruturalmente.
- YAML é preferencial, JSON é alternativo.
- O formato é inferido pela extensão do arquivo.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .capabilities import DestinationCapabilities
from .errors import (
    CatalogFileNotFoundError,
    CatalogParseError,
    UnsupportedCatalogFormatError,
)
from .schema import validate_capabilities_document, validate_catalog_document
from .types import SyncSchema


def _read_document(path: Union[str, Path]) -> Dict[str, Any]:
    """Lê um documento YAML/JSON e garante raiz do tipo dict.

    Raises:
        CatalogFileNotFoundError: se arquivo não existir.
        UnsupportedCatalogFormatError: se extensão não suportada.
        CatalogParseError: se parsing falhar ou a raiz não for mapping.
    """
    p = Path(path)
    if not p.exists():
        raise CatalogFileNotFoundError(f"catalog file not found: {p}")

    suffix = p.suffix.lower()
    raw = p.read_text(encoding="utf-8")

    try:
        if suffix in {".yml", ".yaml"}:
            data = yaml.safe_load(raw)
        elif suffix == ".json":
            data = json.loads(raw)
        else:
            raise UnsupportedCatalogFormatError(f"unsupported catalog format: {suffix}")
    except UnsupportedCatalogFormatError:
        raise
    except Exception as e:
        raise CatalogParseError(str(e) or "failed to parse catalog") from e

    if data is None:
        # YAML vazio -> None
        raise CatalogParseError(f"document is empty: {p}")

    if not isinstance(data, dict):
        raise CatalogParseError("document root must be a mapping/dict")

    return data


def load_catalog(*, path: Union[str, Path]) -> SyncSchema:
    """Carrega um catálogo bruto (`{"streams": [...]}`) de YAML/JSON."""
    return validate_catalog_document(_read_document(path))


def load_destination_capabilities(*, path: Union[str, Path]) -> DestinationCapabilities:
    """Carrega o descritor de capacidades do destino de YAML/JSON."""
    return validate_capabilities_document(_read_document(path))
