import pytest


@pytest.fixture
def sample_records():
    """A small export mixing key casings, date formats and sentinel values."""
    return [
        {
            "Autor": "Ana",
            "Data": "2025-09-08T08:22:00",
            "Capítulo": "Capítulo 1",
            "Seção": "Seção A",
            "Missão": "M1",
            "Meta": "Meta 1",
            "Ação": "Ação X",
            "Comentário": "Bioeconomia e inovação para a Amazônia",
        },
        {
            "autor": " ana ",
            "data": "08/09/2025",
            "capitulo": "Capítulo 1",
            "secao": "NDA",
            "missao": "M2",
            "meta": "NÃO IDENTIFICADO",
            "acao": "Ação X",
            "comentario": "Inovação na bioeconomia",
        },
        {
            "AUTOR": "Bruno",
            "DATE": 1759161360000,
            "Capítulo": "Capítulo 2",
            "Missão": "M3",
            "Ação": "Ação Y",
            "Texto da Contribuição": "Fortalecer cadeias da sociobiodiversidade",
        },
        {
            "Autor": "Carla",
            "Data": "15/12/2024",
            "Capítulo": "",
        },
        "not a record",
    ]
