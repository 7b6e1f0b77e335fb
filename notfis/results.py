# -*- coding: utf-8 -*-
"""
Tipos de resultado do formatador e dos construtores de registro.

Cada resultado é OU um sucesso (texto/linha formatada) OU uma falha
(mensagem de erro). As duas variantes expõem os mesmos atributos
(`text`/`line` e `error`), então o chamador pode tanto checar o tipo
quanto simplesmente testar `if result.error:` antes de usar a linha.
"""

from dataclasses import dataclass
from typing import Optional

from notfis.error_handler import RecordFormatError


class FieldResult:
    """Resultado da formatação de UM campo."""

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class FormattedField(FieldResult):
    text: str

    @property
    def error(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class FieldError(FieldResult):
    error: str

    @property
    def text(self) -> str:
        return ""


class RecordResult:
    """Resultado da montagem de UMA linha (registro) NOTFIS."""

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        """Retorna a linha ou levanta RecordFormatError com os erros agregados."""
        if self.error is not None:
            raise RecordFormatError(self.error)
        return self.line


@dataclass(frozen=True)
class RecordLine(RecordResult):
    line: str

    @property
    def error(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class RecordError(RecordResult):
    error: str

    @property
    def line(self) -> str:
        return ""
