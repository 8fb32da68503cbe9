"""Erros canônicos do domínio de Operations (SyncConf)."""


class OperationError(Exception):
    """Erro base do domínio de operações."""


class OperationValidationError(OperationError):
    """Operação persistida não é estruturalmente válida (`OperationRead`)."""
