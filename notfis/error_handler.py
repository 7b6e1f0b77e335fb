# -*- coding: utf-8 -*-
"""
Módulo de Tratamento de Erros (notfis/error_handler.py).

Responsabilidade:
1. Definir a hierarquia de exceções do pacote.
2. Separar erros de programação (layout mal definido, tipo de registro
   desconhecido) dos erros de dados, que NUNCA são levantados: eles
   voltam no campo `.error` dos resultados (ver notfis/results.py).
"""


class NotfisError(Exception):
    """
    Classe base para todas as exceções do gerador NOTFIS.
    Captura a mensagem e, opcionalmente, a exceção original (chaining).
    """

    def __init__(self, message, original_exception=None):
        super().__init__(message)
        self.original_exception = original_exception


class LayoutError(NotfisError):
    """
    Levantado quando um layout de registro é inconsistente ou não existe.
    Ex: soma das larguras diferente do tamanho do registro, código de
    registro desconhecido, linha com tamanho que não bate com o layout.
    Ação recomendada: corrigir o código chamador, não os dados.
    """

    pass


class RecordFormatError(NotfisError):
    """
    Levantado apenas por `RecordResult.unwrap()`, para quem prefere
    exceções em vez de checar `.error`.
    O atributo `errors` guarda cada mensagem de campo separadamente.
    """

    def __init__(self, message, original_exception=None):
        super().__init__(message, original_exception)
        self.errors = message.split("\n") if message else []
