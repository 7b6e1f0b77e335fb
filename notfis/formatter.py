# -*- coding: utf-8 -*-
"""
Módulo Formatador de Campos.

Converte UM campo lógico (valor + tipo + tamanho + casas decimais) em um
trecho de texto de largura fixa, no padrão posicional NOTFIS 3.1:
- Numérico (N): dígitos sem separador decimal, zeros à esquerda.
- Alfanumérico (A): texto com espaços à direita.

O formatador nunca levanta exceção por causa dos dados: toda falha volta
como FieldError com a mensagem de diagnóstico.
"""

import enum
import numbers
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Any, Optional, Union

from notfis.results import FieldError, FieldResult, FormattedField
from notfis.utils import is_absent


class FieldKind(enum.Enum):
    NUMERIC = "N"
    ALPHANUMERIC = "A"


@dataclass(frozen=True)
class FieldSpec:
    """
    /// Dados de um campo a ser formatado.
    /// `decimal_places` só é obrigatório para campos numéricos.
    """

    name: Optional[str]
    value: Any
    kind: Union[FieldKind, str, None]
    width: Optional[int]
    decimal_places: Optional[int] = None


def _resolve_kind(kind):
    # Aceita o enum ou a sigla do layout ("N"/"A")
    if isinstance(kind, FieldKind):
        return kind
    try:
        return FieldKind(kind)
    except ValueError:
        return None


def _size_error(spec, length):
    return FieldError(
        f"Size error: field {spec.name} must have size {spec.width} "
        f"but content has {length}"
    )


def _missing_error(spec):
    return FieldError(
        f"Argument error: all field data must be provided "
        f"(field {spec.name}). {spec!r}"
    )


def to_decimal(value, decimal_places):
    """
    /// Converte o valor para Decimal com exatamente `decimal_places` casas.
    /// Arredondamento ROUND_HALF_UP (2.345 -> 2.35).
    /// String vazia vale zero. Retorna None se não for um número válido:
    /// texto, vírgula decimal ("12,5"), NaN, infinito, booleano ou negativo.
    """
    if isinstance(value, bool):
        return None

    if isinstance(value, str):
        raw = value.strip()
        if not raw:
            raw = "0"
    elif isinstance(value, Decimal):
        raw = value
    elif isinstance(value, numbers.Integral):
        # Inclui inteiros do numpy (células de DataFrame)
        raw = int(value)
    elif isinstance(value, numbers.Real):
        # str() de float é a representação mais curta (12.3 e não 12.2999...)
        raw = str(float(value))
    else:
        return None

    try:
        d = Decimal(raw)
        if not d.is_finite():
            return None
        # Precisão suficiente para todos os dígitos; o tamanho é checado depois
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, d.adjusted() + decimal_places + 2)
            quantized = d.quantize(
                Decimal(1).scaleb(-decimal_places), rounding=ROUND_HALF_UP
            )
    except (ValueError, TypeError, InvalidOperation):
        return None

    if quantized.is_signed():
        if quantized != 0:
            return None
        # -0.00 vira 0.00
        quantized = quantized.copy_abs()

    return quantized


def _format_numeric(spec):
    if (
        is_absent(spec.value)
        or spec.width is None
        or spec.decimal_places is None
        or spec.name is None
    ):
        return _missing_error(spec)

    number = to_decimal(spec.value, spec.decimal_places)
    if number is None:
        return FieldError(
            f"Argument error: invalid number for field {spec.name} ({spec.value})"
        )

    # Formato fixo ('f') nunca usa notação científica; depois remove o ponto
    digits = format(number, "f").replace(".", "")

    if len(digits) > spec.width:
        return _size_error(spec, len(digits))

    return FormattedField(digits.rjust(spec.width, "0"))


def _format_alphanumeric(spec):
    if is_absent(spec.value) or spec.width is None or spec.name is None:
        return _missing_error(spec)

    text = spec.value if isinstance(spec.value, str) else str(spec.value)

    if len(text) > spec.width:
        return _size_error(spec, len(text))

    return FormattedField(text.ljust(spec.width, " "))


def format_field(spec: FieldSpec) -> FieldResult:
    """
    Formata um campo conforme o tipo.

    Ordem das verificações:
    1. Tipo ausente ou inválido.
    2. Dados obrigatórios ausentes (valor, tamanho, nome e, se numérico,
       casas decimais).
    3. Conversão numérica (apenas N).
    4. Estouro de tamanho: o conteúdo NUNCA é truncado.

    Exemplos:
        >>> format_field(FieldSpec("QTDE", 12.3, FieldKind.NUMERIC, 6, 2)).text
        '001230'
        >>> format_field(FieldSpec("UF", "AB", FieldKind.ALPHANUMERIC, 5)).text
        'AB   '
    """
    if spec.kind is None:
        return FieldError(
            f"Argument error: field kind must be specified. {spec!r}"
        )

    kind = _resolve_kind(spec.kind)

    if kind is FieldKind.NUMERIC:
        return _format_numeric(spec)

    if kind is FieldKind.ALPHANUMERIC:
        return _format_alphanumeric(spec)

    return FieldError(f"Argument error: invalid field kind. {spec!r}")
