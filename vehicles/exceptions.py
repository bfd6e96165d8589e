# vehicles/exceptions.py


class DataLoadFailure(Exception):
    """
    Falha ao obter os registros de produção da fonte de dados.

    É o único tipo de erro do dashboard: a view captura, registra no log e
    mostra a mensagem fixa ao usuário, sem distinguir a causa.
    """
