"""Tipos de erro da coleta."""


class CatalogError(Exception):
    """Base para falhas que abortam a execução."""


class ConfigError(CatalogError):
    """Configuração obrigatória ausente."""


class RemoteError(CatalogError):
    """A API respondeu com `error` ou a chamada HTTP falhou."""


class PersistError(CatalogError, OSError):
    """Falha ao criar o diretório ou gravar o arquivo de saída."""
