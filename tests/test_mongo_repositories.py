from bson import ObjectId

from quiniela.repositories.jugada_repository import JugadaRepository, collection_name_for
from quiniela.repositories.pasador_repository import PasadorRepository


class _InsertResult:
    def __init__(self, inserted_id):
        self.inserted_id = inserted_id


class _Cursor(list):
    def sort(self, key, direction):
        return _Cursor(sorted(self, key=lambda d: d.get(key), reverse=direction < 0))


class _Collection:
    def __init__(self):
        self.docs = []

    def find(self, query):
        return _Cursor(self.docs)

    def find_one(self, query):
        wanted = query["_id"]["$in"]
        for doc in self.docs:
            if doc["_id"] in wanted:
                return doc
        return None

    def insert_one(self, doc):
        doc.setdefault("_id", ObjectId())
        self.docs.append(doc)
        return _InsertResult(doc["_id"])


class _Database(dict):
    def __missing__(self, name):
        self[name] = _Collection()
        return self[name]


def test_pasadores_sorted_by_display_id():
    db = _Database()
    db["pasadores"].docs = [
        {"_id": "b", "displayId": "002", "nombre": "Ana"},
        {"_id": "a", "displayId": "001", "nombre": "Juan", "nombreFantasia": "La Suerte"},
    ]
    records = PasadorRepository(db).list_all()
    assert [r.id for r in records] == ["a", "b"]
    assert records[1].trade_name == ""
    assert records[1].label == "002 - Ana"


def test_pasador_lookup_by_object_id():
    oid = ObjectId()
    db = _Database()
    db["pasadores"].docs = [{"_id": oid, "displayId": "009", "nombre": "Luis"}]
    repo = PasadorRepository(db)
    assert repo.get_by_id(str(oid)).name == "Luis"
    assert repo.get_by_id("missing") is None


def test_jugadas_go_to_the_passer_collection():
    db = _Database()
    document = {"secuencia": "000010000"}
    record_id = JugadaRepository(db).insert("Juan Perez", document)

    saved = db[collection_name_for("Juan Perez")].docs
    assert collection_name_for("Juan Perez") == "JUGADAS DE Juan Perez"
    assert len(saved) == 1
    assert record_id == str(saved[0]["_id"])
    assert "_id" not in document
