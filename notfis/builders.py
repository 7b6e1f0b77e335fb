# -*- coding: utf-8 -*-
"""
Módulo Construtor de Registros NOTFIS 3.1.

Cada construtor recebe um dicionário (ou uma linha de DataFrame) com os
dados de UM registro e devolve um RecordResult:
- RecordLine: `.line` com a linha de largura fixa, `.error` é None.
- RecordError: `.error` com a(s) mensagem(ns), `.line` é "".

Fluxo de cada construtor (igual para os seis, ver 'build_record'):
1. Verifica se todos os dados obrigatórios foram informados (falha rápida,
   nenhum campo é formatado).
2. Formata TODOS os campos na ordem do layout, sem parar no primeiro erro.
3. Junta os erros (um por linha) ou concatena os textos na linha final.
"""

from notfis.error_handler import LayoutError
from notfis.formatter import format_field
from notfis.layout_config import (
    CABECALHO_DOCUMENTO,
    CABECALHO_INTERCAMBIO,
    DADOS_DESTINATARIO,
    DADOS_EMBARCADORA,
    LAYOUTS,
    NOTA_FISCAL,
    VALORES_TOTAIS_DOCUMENTO,
)
from notfis.results import RecordError, RecordLine
from notfis.utils import describe_payload, get_module_logger, is_absent

logger = get_module_logger("builders")


def build_record(layout, data):
    """
    Monta uma linha a partir de um layout.

    Args:
        layout (RecordLayout): Layout do registro (ver layout_config.py).
        data (Mapping | pandas.Series): Dados de entrada, por chave.

    Returns:
        RecordResult: RecordLine ou RecordError.
    """
    # ETAPA 1: Dados obrigatórios
    missing = [key for key in layout.required_keys if is_absent(data.get(key))]
    if missing:
        logger.debug(
            f"[{layout.record_type}] Dados ausentes: {', '.join(missing)}"
        )
        return RecordError(
            f"Argument error ({layout.builder_name}): all line data must be provided. "
            f"Missing: {', '.join(missing)}. {describe_payload(data)}"
        )

    # ETAPA 2: Formata campo a campo, na ordem do layout
    line_parts = []
    errors = []
    for layout_field in layout.fields_for(data):
        result = format_field(layout_field.to_spec(data))
        if result.error:
            errors.append(result.error)
        line_parts.append(result.text)

    # ETAPA 3: Com erro a linha é descartada; não se deve utilizá-la
    if errors:
        logger.debug(
            f"[{layout.record_type}] Registro rejeitado com {len(errors)} erro(s)"
        )
        return RecordError("\n".join(errors))

    return RecordLine("".join(line_parts))


def mk_cabecalho_intercambio(data):
    """
    Cria CABEÇALHO DE INTERCÂMBIO (000) - NOTFIS 3.1.

    Chaves: remetente, destinatario (caixas postais), data (DDMMAA),
    hora (HHMM), identificacao (sugestão: "NOTDDMMHHMMS").
    """
    return build_record(CABECALHO_INTERCAMBIO, data)


def mk_cabecalho_documento(data):
    """
    Cria CABEÇALHO DE DOCUMENTO (310) - NOTFIS 3.1.

    Chaves: identificacao (sugestão: "NOTFIDDMMHHMMS").
    """
    return build_record(CABECALHO_DOCUMENTO, data)


def mk_dados_embarcadora(data):
    """
    Cria DADOS DA EMBARCADORA (311) - NOTFIS 3.1.

    Chaves: cnpj (somente números), ie, endereco, cidade, cep, estado (UF),
    data (embarque, DDMMAAAA), nome_embarcadora (razão social).
    """
    return build_record(DADOS_EMBARCADORA, data)


def mk_dados_destinatario(data):
    """
    Cria DADOS DO DESTINATÁRIO (312) - NOTFIS 3.1.

    Chaves: razao_social, cnpj_cpf, ie, endereco, bairro, cidade, cep,
    codigo_de_municipio, estado, area_de_frete, numero_de_comunicacao,
    tipo_identificacao_cnpj_cpf (1=CNPJ, 2=CPF).
    """
    return build_record(DADOS_DESTINATARIO, data)


def mk_nota_fiscal(data):
    """
    Cria DADOS DE NOTA FISCAL (313) - NOTFIS 3.1.

    Exige as 30 chaves do layout NOTA_FISCAL. A chave 'cfop' é opcional:
    quando informada, a linha ganha 4 posições no final.
    """
    return build_record(NOTA_FISCAL, data)


def mk_valores_totais_documento(data):
    """
    Cria VALORES TOTAIS DO DOCUMENTO (318) - NOTFIS 3.1.

    Chaves: valor_total_nf, peso_total_nf, peso_total_densidade_cubagem,
    qtd_total_volumes, total_a_ser_cobrado, total_seguro.
    Os totais são somatórios dos registros 313 feitos pelo chamador.
    """
    return build_record(VALORES_TOTAIS_DOCUMENTO, data)


BUILDERS = {
    "000": mk_cabecalho_intercambio,
    "310": mk_cabecalho_documento,
    "311": mk_dados_embarcadora,
    "312": mk_dados_destinatario,
    "313": mk_nota_fiscal,
    "318": mk_valores_totais_documento,
}


def build(record_type, data):
    """
    Monta o registro pelo código (ex: "313").

    Raises:
        LayoutError: código de registro desconhecido (erro do chamador).
    """
    builder = BUILDERS.get(str(record_type))
    if builder is None:
        raise LayoutError(
            f"Unknown record type {record_type!r}; expected one of {', '.join(LAYOUTS)}"
        )
    return builder(data)
