# -*- coding: utf-8 -*-
"""
Módulo de Configuração do Layout NOTFIS 3.1.

Este arquivo é um dos mais importantes do projeto. Ele centraliza os
layouts posicionais de cada registro. Ele NÃO contém lógica, apenas
estruturas de dados usadas pelo 'builders.py'.

Regras que NÃO podem mudar (os parceiros EDI leem por posição):
- A ordem dos campos em cada lista é a ordem física das colunas.
- Os tamanhos (e casas decimais) seguem o manual NOTFIS 3.1.
- Campos numéricos com decimais: o tamanho é o TOTAL, não apenas a
  parte inteira (ex: "N 13,2" ocupa 15 posições).

Estrutura do arquivo (responsabilidade do chamador):
    000 x1
        310 x200
            311 x10
                312 x500
                    313 x40
                318 x1
"""

from notfis.layout import A, N, RecordLayout, filler, record_id

# --- 000: CABEÇALHO DE INTERCÂMBIO ---
CABECALHO_INTERCAMBIO = RecordLayout(
    record_type="000",
    builder_name="mk_cabecalho_intercambio",
    description="CABEÇALHO DE INTERCÂMBIO",
    width=240,
    fields=(
        record_id("000"),
        A("IDENTIFICAÇÃO DO REMETENTE", 35, key="remetente"),
        A("IDENTIFICAÇÃO DO DESTINATÁRIO", 35, key="destinatario"),
        N("DATA", 6, key="data"),  # DDMMAA
        N("HORA", 4, key="hora"),  # HHMM
        A("IDENTIFICAÇÃO DO INTERCÂMBIO", 12, key="identificacao"),  # NOTDDMMHHMMS
        filler(145),
    ),
)

# --- 310: CABEÇALHO DE DOCUMENTO ---
CABECALHO_DOCUMENTO = RecordLayout(
    record_type="310",
    builder_name="mk_cabecalho_documento",
    description="CABEÇALHO DE DOCUMENTO",
    width=240,
    fields=(
        record_id("310"),
        A("IDENTIFICAÇÃO DO DOCUMENTO", 14, key="identificacao"),  # NOTFIDDMMHHMMS
        filler(223),
    ),
)

# --- 311: DADOS DA EMBARCADORA ---
DADOS_EMBARCADORA = RecordLayout(
    record_type="311",
    builder_name="mk_dados_embarcadora",
    description="DADOS DA EMBARCADORA",
    width=240,
    fields=(
        record_id("311"),
        N("CGC/CNPJ", 14, key="cnpj"),
        A("INSCRIÇÃO ESTADUAL", 15, key="ie"),
        A("ENDEREÇO", 40, key="endereco"),
        A("CIDADE", 35, key="cidade"),
        A("CEP", 9, key="cep"),
        A("ESTADO (2 DIGITOS)", 9, key="estado"),
        N("DATA DE EMBARQUE", 8, key="data"),  # DDMMAAAA
        A("NOME DA EMPRESA EMBARCADORA (RAZÃO SOCIAL)", 40, key="nome_embarcadora"),
        filler(67),
    ),
)

# --- 312: DADOS DO DESTINATÁRIO ---
DADOS_DESTINATARIO = RecordLayout(
    record_type="312",
    builder_name="mk_dados_destinatario",
    description="DADOS DO DESTINATÁRIO",
    width=240,
    fields=(
        record_id("312"),
        A("RAZÃO SOCIAL", 40, key="razao_social"),
        N("CNPJ/CPF", 14, key="cnpj_cpf"),
        A("INSCRIÇÃO ESTADUAL", 15, key="ie"),
        A("ENDEREÇO", 40, key="endereco"),
        A("BAIRRO", 20, key="bairro"),
        A("CIDADE", 35, key="cidade"),
        A("CEP", 9, key="cep"),
        A("CÓDIGO DE MUNICÍPIO", 9, key="codigo_de_municipio"),
        A("ESTADO (2 DIGITOS)", 9, key="estado"),
        A("ÁREA DE FRETE", 4, key="area_de_frete"),
        A("NÚMERO DE COMUNICAÇÃO (TELEFONE, FAX, ETC.)", 35, key="numero_de_comunicacao"),
        A(
            "TIPO DE IDENTIFICAÇÃO DO DESTINATÁRIO (1=CNPJ, 2=CPF)",
            1,
            key="tipo_identificacao_cnpj_cpf",
        ),
        filler(6),
    ),
)

# --- 313: DADOS DE NOTA FISCAL ---
# Único registro com campo opcional: CFOP (A 4) no final, só quando informado.
NOTA_FISCAL = RecordLayout(
    record_type="313",
    builder_name="mk_nota_fiscal",
    description="DADOS DE NOTA FISCAL",
    width=282,
    fields=(
        record_id("313"),
        A("NUM. ROMANEIO/COLETA.RESUMO DE CARGA", 15, key="romaneio"),
        A("CÓDIGO DA ROTA", 7, key="codigo_rota"),
        # 1=RODOVIÁRIO 2=AÉREO 3=MARÍTIMO 4=FLUVIAL 5=FERROVIÁRIO
        N("MEIO DE TRANSPORTE", 1, key="meio_de_transporte"),
        # 1=CARGA FECHADA 2=CARGA FRACIONADA
        N("TIPO DO TRANSPORTE DA CARGA", 1, key="tipo_de_transporte"),
        # 1=FRIA 2=SECA 3=MISTA
        N("TIPO DE CARGA", 1, key="tipo_de_carga"),
        A("CONDIÇÃO DE FRETE", 1, key="condicao_de_frete"),  # C=CIF F=FOB
        A("SÉRIE DA NOTA FISCAL", 3, key="serie_nf"),
        N("NÚMERO DA NOTA FISCAL", 8, key="numero_nf"),
        N("DATA DE EMISSÃO", 8, key="data_emissao"),  # DDMMAAAA
        A("NATUREZA DA MERCADORIA", 15, key="natureza"),
        A("ESPÉCIE DE ACONDICIONAMENTO", 15, key="acondicionamento"),
        N("QTDE DE VOLUMES", 7, 2, key="qtd_volumes"),  # N 5,2
        N("VALOR TOTAL DA NOTA", 15, 2, key="valor_nota"),  # N 13,2
        N("PESO TOTAL DA MERCADORIA", 7, 2, key="peso_total"),  # N 5,2
        N("PESO DENSIDADE/CUBAGEM", 5, 2, key="peso_densidade_cubagem"),  # N 3,2
        # D=Diferido R=Reduzido P=Presumido T=Substituição S=Normal N=Isento
        A("TIPO DE ICMS", 1, key="tipo_icms"),
        A("SEGURO JÁ EFETUADO", 1, key="seguro"),  # S/N
        N("VALOR DO SEGURO", 15, 2, key="valor_seguro"),
        N("VALOR A SER COBRADO", 15, 2, key="valor_a_ser_cobrado"),
        A("PLACA DO CAMINHÃO/CARRETA", 7, key="placa"),
        A("PLANO DE CARGA RÁPIDA", 1, key="plano_carga_rapida"),  # S/N
        N("VALOR DO FRETE PESO-VOLUME", 15, 2, key="valor_frete_peso_volume"),
        N("VALOR AD VALOREM", 15, 2, key="valor_ad_valorem"),
        N("VALOR TOTAL DAS TAXAS", 15, 2, key="valor_total_taxas"),
        N("VALOR TOTAL DO FRETE", 15, 2, key="valor_total_frete"),
        A("AÇÃO DO DOCUMENTO", 1, key="acao_do_documento"),  # I=Inclusão E=Exclusão
        N("VALOR DO ICMS", 12, 2, key="valor_icms"),  # N 10,2
        N("VALOR DO ICMS RETIDO", 12, 2, key="valor_icms_retido"),  # N 10,2
        A("INDICAÇÃO DE BONIFICAÇÃO", 1, key="indicacao_de_bonificacao"),  # S/N
        A("CHAVE CTE", 44, key="chave_cte"),
    ),
    optional_fields=(A("CFOP", 4, key="cfop"),),
)

# --- 318: VALORES TOTAIS DO DOCUMENTO ---
# Todos os valores são somatórios dos registros 313, calculados pelo chamador.
VALORES_TOTAIS_DOCUMENTO = RecordLayout(
    record_type="318",
    builder_name="mk_valores_totais_documento",
    description="VALORES TOTAIS DO DOCUMENTO",
    width=240,
    fields=(
        record_id("318"),
        N("VALOR TOTAL DAS NOTAS FISCAIS", 15, 2, key="valor_total_nf"),
        N("PESO TOTAL DAS NOTAS FISCAIS", 15, 2, key="peso_total_nf"),
        N("PESO TOTAL DENSIDADE/CUBAGEM", 15, 2, key="peso_total_densidade_cubagem"),
        N("QUANTIDADE TOTAL DE VOLUMES", 15, 2, key="qtd_total_volumes"),
        N("VALOR TOTAL A SER COBRADO", 15, 2, key="total_a_ser_cobrado"),
        N("VALOR TOTAL DO SEGURO", 15, 2, key="total_seguro"),
        filler(147),
    ),
)

# Registro por código (000, 310, ...). A ordem segue a estrutura do arquivo.
LAYOUTS = {
    layout.record_type: layout
    for layout in (
        CABECALHO_INTERCAMBIO,
        CABECALHO_DOCUMENTO,
        DADOS_EMBARCADORA,
        DADOS_DESTINATARIO,
        NOTA_FISCAL,
        VALORES_TOTAIS_DOCUMENTO,
    )
}
