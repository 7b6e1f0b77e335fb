# -*- coding: utf-8 -*-
"""
Estruturas que descrevem um layout de registro NOTFIS.

Um RecordLayout é uma sequência ORDENADA de LayoutField. A ordem define a
posição física das colunas na linha e nunca deve ser alterada.
"""

from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from notfis.error_handler import LayoutError
from notfis.formatter import FieldKind, FieldSpec
from notfis.utils import is_absent

FILLER = "FILLER"


@dataclass(frozen=True)
class LayoutField:
    """
    /// Um campo do layout.
    /// `key` é a chave lida do dicionário de entrada; campos sem `key`
    /// (identificador de registro, FILLER) usam o valor fixo `constant`.
    """

    name: str
    kind: FieldKind
    width: int
    decimal_places: int = 0
    key: Optional[str] = None
    constant: Any = None

    @property
    def is_constant(self) -> bool:
        return self.key is None

    @property
    def label(self) -> str:
        # Chave usada ao decompor a linha
        return self.key if self.key is not None else self.name

    def to_spec(self, data) -> FieldSpec:
        value = self.constant if self.is_constant else data.get(self.key)
        return FieldSpec(
            name=self.name,
            value=value,
            kind=self.kind,
            width=self.width,
            decimal_places=self.decimal_places,
        )


def N(name, width, decimal_places=0, key=None, constant=None):
    return LayoutField(name, FieldKind.NUMERIC, width, decimal_places, key, constant)


def A(name, width, key=None, constant=None):
    return LayoutField(name, FieldKind.ALPHANUMERIC, width, 0, key, constant)


def record_id(code):
    return N("IDENTIFICADOR DE REGISTRO", 3, constant=code)


def filler(width):
    return A(FILLER, width, constant="")


@dataclass(frozen=True)
class RecordLayout:
    """
    /// Layout completo de um tipo de registro.
    /// `optional_fields` são anexados ao final apenas quando a chave
    /// correspondente está presente na entrada (ex: CFOP no registro 313).
    """

    record_type: str
    builder_name: str
    description: str
    width: int
    fields: Tuple[LayoutField, ...]
    optional_fields: Tuple[LayoutField, ...] = field(default_factory=tuple)

    def __post_init__(self):
        declared = sum(f.width for f in self.fields)
        if declared != self.width:
            raise LayoutError(
                f"Layout {self.record_type}: fields add up to {declared} "
                f"but the record must have {self.width}"
            )
        first = self.fields[0] if self.fields else None
        if first is None or first.constant != self.record_type:
            raise LayoutError(
                f"Layout {self.record_type}: first field must be the record identifier"
            )

    @property
    def required_keys(self):
        return [f.key for f in self.fields if not f.is_constant]

    @property
    def max_width(self) -> int:
        return self.width + sum(f.width for f in self.optional_fields)

    def fields_for(self, data):
        """Campos efetivos para a entrada: base + opcionais presentes."""
        extra = tuple(f for f in self.optional_fields if not is_absent(data.get(f.key)))
        return self.fields + extra


def split_record(layout: RecordLayout, line: str):
    """
    Decompõe uma linha já montada nos seus campos.

    Fatia a linha pelos deslocamentos acumulados das larguras.
    Campos alfanuméricos têm os espaços à direita removidos; numéricos
    voltam intactos (com os zeros à esquerda).
    Os campos opcionais entram apenas se a linha tiver exatamente o
    tamanho necessário para cada um deles.

    Raises:
        LayoutError: se o tamanho da linha não corresponde ao layout.
    """
    fields = list(layout.fields)
    expected = layout.width
    for optional in layout.optional_fields:
        if len(line) < expected + optional.width:
            break
        fields.append(optional)
        expected += optional.width

    if len(line) != expected:
        raise LayoutError(
            f"Line has {len(line)} characters; layout {layout.record_type} "
            f"expects {layout.width} (up to {layout.max_width})"
        )

    values = OrderedDict()
    offset = 0
    for f in fields:
        token = line[offset : offset + f.width]
        offset += f.width
        if f.kind is FieldKind.ALPHANUMERIC:
            token = token.rstrip(" ")
        values[f.label] = token
    return values
