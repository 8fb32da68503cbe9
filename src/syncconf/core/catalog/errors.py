"""Erros canônicos do domínio de Catalog (SyncConf).

O catálogo descoberto e o descritor de capacidades do destino são entradas
críticas do engine. Falhas de carregamento/validação estrutural devem
produzir erros explícitos e estáveis, antes de qualquer resolução.
"""


class CatalogError(Exception):
    """Erro base do domínio de catálogo."""


class CatalogFileNotFoundError(CatalogError):
    """Arquivo de catálogo (ou de capacidades) não existe no caminho informado."""


class UnsupportedCatalogFormatError(CatalogError):
    """Formato não suportado (v1: YAML/JSON)."""


class CatalogParseError(CatalogError):
    """Falha ao parsear YAML/JSON."""


class CatalogValidationError(CatalogError):
    """Documento não é estruturalmente válido segundo o schema canônico."""
