# -*- coding: utf-8 -*-
"""
Módulo de Utilitários (notfis/utils.py).

Responsabilidade:
1. Configurar o logging centralizado (Console + Arquivo opcional com rotação).
2. Funções auxiliares de presença de dados, compartilhadas pelo formatador
   e pelos construtores de registro.
"""

import json
import logging
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pandas as pd

from notfis.config import Config

LOG_FORMAT = (
    "%(asctime)s [%(levelname)-8s] [%(name)s:%(lineno)d] [%(threadName)s] %(message)s"
)
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


# --- Funções de Logging ---


def setup_logger(name="notfis", log_level=logging.DEBUG):
    """
    Configura um logger nomeado.

    Estratégia de Logging:
    - Console (StreamHandler): nível definido por Config.LOG_LEVEL (padrão INFO).
    - Arquivo (RotatingFileHandler): registra TUDO (DEBUG+), somente quando
      Config.LOG_DIR estiver configurado. Nome: notfis_YYYYMMDD.log.

    Args:
        name (str): Nome do logger.
        log_level (int): Nível mínimo do logger (padrão: DEBUG).

    Returns:
        logging.Logger: Instância configurada e pronta para uso.
    """
    logger = logging.getLogger(name)

    # Evita duplicação de handlers se o logger já estiver configurado.
    if logger.handlers:
        return logger

    logger.setLevel(log_level)
    logger.propagate = False

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    if Config.LOG_DIR:
        log_dir = Path(Config.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_filepath = log_dir / f"notfis_{datetime.now().strftime('%Y%m%d')}.log"

        file_handler = RotatingFileHandler(
            log_filepath,
            maxBytes=Config.LOG_MAX_BYTES,
            backupCount=Config.LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(logging.DEBUG)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(getattr(logging, Config.LOG_LEVEL, logging.INFO))
    logger.addHandler(console_handler)

    return logger


def get_module_logger(module_name):
    """
    Cria um logger específico para um módulo do pacote.

    Exemplo:
        >>> logger = get_module_logger('builders')
        # 2026-10-19 14:32:10 [DEBUG   ] [notfis.builders:88] [MainThread] ...
    """
    return setup_logger(f"notfis.{module_name}")


# --- Funções Auxiliares ---


def is_absent(value):
    """
    /// Um valor está ausente quando é None ou NA do pandas (NaN, NaT, pd.NA).
    /// Linhas vindas de um DataFrame chegam com NaN nas células vazias.
    """
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        # Sequências (listas, arrays) não são NA escalar
        return False


def describe_payload(data):
    """Serializa a entrada para mensagens de erro (dict ou pandas Series)."""
    if isinstance(data, pd.Series):
        data = data.to_dict()
    try:
        return json.dumps(dict(data), ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return repr(data)
