import importlib.util
import json
import pathlib

import pytest

SCRIPT = pathlib.Path(__file__).resolve().parents[1] / "scripts" / "import_pasadores_mongo.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("import_pasadores_mongo", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class _Collection:
    def __init__(self):
        self.indexes = []
        self.upserts = []

    def create_index(self, key, unique=False):
        self.indexes.append((key, unique))

    def update_one(self, match, update, upsert=False):
        self.upserts.append((match, update["$set"], upsert))


class _Client:
    instances = []

    def __init__(self, uri):
        self.uri = uri
        self.closed = False
        self.collection = _Collection()
        _Client.instances.append(self)

    def __getitem__(self, name):
        return {"pasadores": self.collection}

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True
        return False


@pytest.fixture()
def script(monkeypatch):
    module = _load_script()
    _Client.instances.clear()
    monkeypatch.setattr(module, "MongoClient", _Client)
    return module


def test_upserts_passers_and_closes_client(script, tmp_path):
    path = tmp_path / "pasadores.json"
    path.write_text(
        json.dumps(
            [
                {"id": "p1", "displayId": "001", "nombre": "Juan Perez", "nombreFantasia": "La Suerte"},
                {"displayId": "002", "nombre": "Ana Gomez"},
            ]
        ),
        encoding="utf-8",
    )

    assert script.main([str(path), "--mongo-uri", "mongodb://db:27017", "--mongo-db", "q"]) == 0

    client = _Client.instances[0]
    assert client.closed
    assert client.collection.indexes == [("displayId", True)]
    assert client.collection.upserts == [
        ({"_id": "p1"}, {"displayId": "001", "nombre": "Juan Perez", "nombreFantasia": "La Suerte"}, True),
        ({"displayId": "002"}, {"displayId": "002", "nombre": "Ana Gomez", "nombreFantasia": ""}, True),
    ]


def test_rejects_rows_without_name(script, tmp_path):
    path = tmp_path / "pasadores.json"
    path.write_text(json.dumps([{"displayId": "003"}]), encoding="utf-8")

    with pytest.raises(SystemExit):
        script.main([str(path)])
    assert _Client.instances == []
