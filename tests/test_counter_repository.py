from sqlalchemy.orm import sessionmaker

from quiniela.db import create_app_engine
from quiniela.models.base import Base
from quiniela.repositories.counter_repository import CounterRepository
from quiniela.services.sequence_service import SequenceGenerator


def _repo(tmp_path) -> CounterRepository:
    engine = create_app_engine(f"sqlite:///{tmp_path / 'counter.db'}")
    Base.metadata.create_all(bind=engine)
    return CounterRepository(sessionmaker(bind=engine, expire_on_commit=False))


def test_unset_counter_reads_none(tmp_path):
    assert _repo(tmp_path).get("secuenciaCounter") is None


def test_set_then_overwrite(tmp_path):
    repo = _repo(tmp_path)
    repo.set("secuenciaCounter", "10001")
    repo.set("secuenciaCounter", "10002")
    assert repo.get("secuenciaCounter") == "10002"


def test_sequence_persists_across_instances(tmp_path):
    repo = _repo(tmp_path)
    assert SequenceGenerator(repo).next() == "000010000"

    reopened = _repo(tmp_path)
    assert SequenceGenerator(reopened).next() == "000010001"
    assert reopened.get("secuenciaCounter") == "10002"


def test_app_counter_uses_sql_store(app):
    generator = app.extensions["sequence_generator"]
    with app.app_context():
        assert generator.next() == "000010000"
        assert generator.load() == 10001
