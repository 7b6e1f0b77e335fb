import pandas as pd
import pytest

from notfis.builders import (
    build,
    mk_cabecalho_documento,
    mk_cabecalho_intercambio,
    mk_dados_destinatario,
    mk_dados_embarcadora,
    mk_nota_fiscal,
    mk_valores_totais_documento,
)
from notfis.error_handler import LayoutError, RecordFormatError
from notfis.layout import split_record
from notfis.layout_config import (
    DADOS_DESTINATARIO,
    DADOS_EMBARCADORA,
    NOTA_FISCAL,
    VALORES_TOTAIS_DOCUMENTO,
)
from notfis.results import RecordError, RecordLine


# --- Dados de exemplo (um registro válido de cada tipo) ---


def intercambio_data():
    return {
        "remetente": "EMBARCADORA",
        "destinatario": "TRANSPORTADORA",
        "data": "191026",
        "hora": "1430",
        "identificacao": "NOT191014301",
    }


def documento_data():
    return {"identificacao": "NOTFI191014301"}


def embarcadora_data():
    return {
        "cnpj": 12345678000199,
        "ie": "123456789",
        "endereco": "RUA DAS FLORES 100",
        "cidade": "FLORIANOPOLIS",
        "cep": "88010000",
        "estado": "SC",
        "data": "19102026",
        "nome_embarcadora": "EMBARCADORA TESTE LTDA",
    }


def destinatario_data():
    return {
        "razao_social": "COMERCIO DESTINO SA",
        "cnpj_cpf": "98765432000110",
        "ie": "ISENTO",
        "endereco": "AV BRASIL 2000",
        "bairro": "CENTRO",
        "cidade": "CURITIBA",
        "cep": "80010000",
        "estado": "PR",
        "area_de_frete": "A1",
        "codigo_de_municipio": "4106902",
        "numero_de_comunicacao": "4133334444",
        "tipo_identificacao_cnpj_cpf": "1",
    }


def nota_fiscal_data():
    return {
        "romaneio": "ROM001",
        "codigo_rota": "R01",
        "meio_de_transporte": 1,
        "tipo_de_transporte": 2,
        "tipo_de_carga": 2,
        "condicao_de_frete": "C",
        "serie_nf": "1",
        "numero_nf": 12345,
        "data_emissao": "18102026",
        "natureza": "CALCADOS",
        "acondicionamento": "CAIXAS",
        "qtd_volumes": 10,
        "valor_nota": 1500.5,
        "peso_total": 120.75,
        "peso_densidade_cubagem": 1.5,
        "tipo_icms": "S",
        "seguro": "N",
        "valor_seguro": 0,
        "valor_a_ser_cobrado": 0,
        "placa": "ABC1D23",
        "plano_carga_rapida": "N",
        "valor_frete_peso_volume": 80,
        "valor_ad_valorem": 4.5,
        "valor_total_taxas": 10,
        "valor_total_frete": 94.5,
        "acao_do_documento": "I",
        "valor_icms": 180.06,
        "valor_icms_retido": 0,
        "indicacao_de_bonificacao": "N",
        "chave_cte": "4" * 44,
    }


def totais_data():
    return {
        "valor_total_nf": 1500.5,
        "peso_total_nf": 120.75,
        "peso_total_densidade_cubagem": 1.5,
        "qtd_total_volumes": 10,
        "total_a_ser_cobrado": 0,
        "total_seguro": 0,
    }


# --- Larguras e identificadores ---


@pytest.mark.parametrize(
    "builder, data, code, width",
    [
        (mk_cabecalho_intercambio, intercambio_data(), "000", 240),
        (mk_cabecalho_documento, documento_data(), "310", 240),
        (mk_dados_embarcadora, embarcadora_data(), "311", 240),
        (mk_dados_destinatario, destinatario_data(), "312", 240),
        (mk_nota_fiscal, nota_fiscal_data(), "313", 282),
        (mk_valores_totais_documento, totais_data(), "318", 240),
    ],
)
def test_valid_records_have_fixed_width(builder, data, code, width):
    result = builder(data)
    assert isinstance(result, RecordLine), result.error
    assert result.error is None
    assert len(result.line) == width
    assert result.line[:3] == code


def test_cabecalho_intercambio_columns():
    line = mk_cabecalho_intercambio(intercambio_data()).line
    assert line[3:38] == "EMBARCADORA".ljust(35)
    assert line[38:73] == "TRANSPORTADORA".ljust(35)
    assert line[73:79] == "191026"
    assert line[79:83] == "1430"
    assert line[83:95] == "NOT191014301"
    assert line[95:] == " " * 145


def test_cabecalho_documento_columns():
    line = mk_cabecalho_documento(documento_data()).line
    assert line == "310" + "NOTFI191014301" + " " * 223


def test_dados_embarcadora_columns():
    line = mk_dados_embarcadora(embarcadora_data()).line
    assert line[3:17] == "12345678000199"
    assert line[17:32] == "123456789      "

    fields = split_record(DADOS_EMBARCADORA, line)
    assert fields["IDENTIFICADOR DE REGISTRO"] == "311"
    assert fields["cidade"] == "FLORIANOPOLIS"
    assert fields["cep"] == "88010000"
    assert fields["estado"] == "SC"
    assert fields["data"] == "19102026"
    assert fields["nome_embarcadora"] == "EMBARCADORA TESTE LTDA"
    assert fields["FILLER"] == ""


def test_dados_destinatario_keeps_municipio_before_estado():
    line = mk_dados_destinatario(destinatario_data()).line
    fields = split_record(DADOS_DESTINATARIO, line)
    keys = list(fields)
    assert keys.index("codigo_de_municipio") < keys.index("estado")
    assert fields["cnpj_cpf"] == "98765432000110"
    assert fields["tipo_identificacao_cnpj_cpf"] == "1"
    assert line[-6:] == " " * 6


def test_nota_fiscal_monetary_fields():
    line = mk_nota_fiscal(nota_fiscal_data()).line
    fields = split_record(NOTA_FISCAL, line)
    assert fields["qtd_volumes"] == "0001000"
    assert fields["valor_nota"] == "000000000150050"
    assert fields["peso_total"] == "0012075"
    assert fields["peso_densidade_cubagem"] == "00150"
    assert fields["valor_icms"] == "000000018006"
    assert fields["numero_nf"] == "00012345"
    assert fields["chave_cte"] == "4" * 44
    assert "cfop" not in fields


def test_valores_totais_columns():
    line = mk_valores_totais_documento(totais_data()).line
    fields = split_record(VALORES_TOTAIS_DOCUMENTO, line)
    assert fields["valor_total_nf"] == "000000000150050"
    assert fields["qtd_total_volumes"] == "000000000001000"
    assert fields["total_seguro"] == "0" * 15
    assert line[93:] == " " * 147


# --- CFOP opcional ---


def test_nota_fiscal_with_cfop_is_four_characters_longer():
    data = nota_fiscal_data()
    base = mk_nota_fiscal(data).line

    data["cfop"] = "5102"
    with_cfop = mk_nota_fiscal(data).line

    assert len(with_cfop) == len(base) + 4
    assert with_cfop[:-4] == base
    assert with_cfop[-4:] == "5102"
    assert split_record(NOTA_FISCAL, with_cfop)["cfop"] == "5102"


def test_nota_fiscal_short_cfop_is_space_padded():
    data = nota_fiscal_data()
    data["cfop"] = "51"
    assert mk_nota_fiscal(data).line[-4:] == "51  "


@pytest.mark.parametrize("cfop", [None, float("nan")])
def test_nota_fiscal_absent_cfop_is_omitted(cfop):
    data = nota_fiscal_data()
    data["cfop"] = cfop
    assert len(mk_nota_fiscal(data).line) == 282


def test_nota_fiscal_cfop_overflow():
    data = nota_fiscal_data()
    data["cfop"] = "51020"
    result = mk_nota_fiscal(data)
    assert result.line == ""
    assert "field CFOP must have size 4 but content has 5" in result.error


# --- Dados ausentes ---


@pytest.mark.parametrize("missing_key", list(embarcadora_data()))
def test_missing_required_field_fails_fast(missing_key):
    data = embarcadora_data()
    del data[missing_key]
    result = mk_dados_embarcadora(data)
    assert isinstance(result, RecordError)
    assert result.line == ""
    assert "mk_dados_embarcadora" in result.error
    assert missing_key in result.error


def test_none_counts_as_missing():
    data = destinatario_data()
    data["bairro"] = None
    result = mk_dados_destinatario(data)
    assert result.line == ""
    assert "Missing: bairro" in result.error


def test_missing_error_echoes_payload():
    data = nota_fiscal_data()
    del data["placa"]
    result = mk_nota_fiscal(data)
    assert "mk_nota_fiscal" in result.error
    assert "ROM001" in result.error
    # Falha rápida: nenhum erro de campo é gerado
    assert "\n" not in result.error


# --- Agregação de erros ---


def test_all_field_errors_are_collected():
    data = embarcadora_data()
    data["cnpj"] = "12.345.678/0001-99"
    data["cidade"] = "X" * 36
    result = mk_dados_embarcadora(data)

    assert result.line == ""
    messages = result.error.split("\n")
    assert len(messages) == 2
    assert "invalid number for field CGC/CNPJ" in messages[0]
    assert "field CIDADE must have size 35 but content has 36" in messages[1]


def test_unwrap_raises_with_each_error():
    data = totais_data()
    data["valor_total_nf"] = "1.500,50"
    data["total_seguro"] = 10 ** 14
    result = mk_valores_totais_documento(data)

    with pytest.raises(RecordFormatError) as exc_info:
        result.unwrap()
    assert len(exc_info.value.errors) == 2


def test_unwrap_returns_line():
    assert mk_cabecalho_documento(documento_data()).unwrap().startswith("310")


# --- Entrada vinda de DataFrame ---


def test_dataframe_rows_are_accepted():
    df = pd.DataFrame([totais_data(), totais_data()])
    lines = [mk_valores_totais_documento(row).line for _, row in df.iterrows()]
    assert lines[0] == lines[1]
    assert lines[0] == mk_valores_totais_documento(totais_data()).line


def test_dataframe_nan_is_missing():
    row = pd.Series(embarcadora_data())
    row["cep"] = float("nan")
    result = mk_dados_embarcadora(row)
    assert result.line == ""
    assert "cep" in result.error


# --- Propriedades gerais ---


def test_builders_are_idempotent():
    data = nota_fiscal_data()
    assert mk_nota_fiscal(data) == mk_nota_fiscal(data)


def test_build_dispatches_by_record_type():
    assert build("311", embarcadora_data()) == mk_dados_embarcadora(embarcadora_data())
    assert build(318, totais_data()).line.startswith("318")


def test_build_unknown_record_type():
    with pytest.raises(LayoutError):
        build("999", {})
