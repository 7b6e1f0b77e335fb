# -*- coding: utf-8 -*-
"""
Pacote NOTFIS - Gerador de registros NOTFIS 3.1.

Monta as linhas posicionais (largura fixa) do arquivo de notificação de
notas fiscais trocado entre embarcadora e transportadora.
"""

__version__ = "1.0.0"

from notfis.builders import (
    BUILDERS,
    build,
    build_record,
    mk_cabecalho_documento,
    mk_cabecalho_intercambio,
    mk_dados_destinatario,
    mk_dados_embarcadora,
    mk_nota_fiscal,
    mk_valores_totais_documento,
)
from notfis.error_handler import LayoutError, NotfisError, RecordFormatError
from notfis.formatter import FieldKind, FieldSpec, format_field
from notfis.layout import LayoutField, RecordLayout, split_record
from notfis.layout_config import LAYOUTS
from notfis.results import (
    FieldError,
    FieldResult,
    FormattedField,
    RecordError,
    RecordLine,
    RecordResult,
)

__all__ = [
    "BUILDERS",
    "LAYOUTS",
    "build",
    "build_record",
    "mk_cabecalho_intercambio",
    "mk_cabecalho_documento",
    "mk_dados_embarcadora",
    "mk_dados_destinatario",
    "mk_nota_fiscal",
    "mk_valores_totais_documento",
    "format_field",
    "FieldKind",
    "FieldSpec",
    "FieldResult",
    "FormattedField",
    "FieldError",
    "RecordResult",
    "RecordLine",
    "RecordError",
    "LayoutField",
    "RecordLayout",
    "split_record",
    "NotfisError",
    "LayoutError",
    "RecordFormatError",
]
