import os

from dotenv import load_dotenv

# Carrega as variáveis de ambiente do arquivo .env (se existir)
load_dotenv()


class Config:
    """
    Centraliza as configurações do pacote.
    Os layouts NOTFIS são contrato fixo e não ficam aqui; apenas o logging.
    """

    # Nível mínimo exibido no console (DEBUG, INFO, WARNING...)
    LOG_LEVEL = os.environ.get("NOTFIS_LOG_LEVEL", "INFO").upper()

    # Se definido, os logs também vão para arquivo rotativo neste diretório
    LOG_DIR = os.environ.get("NOTFIS_LOG_DIR") or None

    # Rotação: 5 MB por arquivo, mantém os últimos 10
    LOG_MAX_BYTES = 5 * 1024 * 1024
    LOG_BACKUP_COUNT = 10
