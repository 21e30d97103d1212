import random
import uuid

from stafftrack.common import ids


def test_generate_id_is_unique_uuid():
    a = ids.generate_id()
    b = ids.generate_id()

    assert a != b
    assert str(uuid.UUID(a)) == a


def test_fallback_id_has_two_draws_of_alphanumerics():
    value = ids.fallback_id(random.Random(42))

    assert len(value) == 26
    assert value.isalnum()
    assert value[:13] != value[13:]


def test_generate_id_falls_back_when_strong_source_missing(monkeypatch):
    def no_urandom():
        raise NotImplementedError("no os.urandom")

    monkeypatch.setattr(ids.uuid, "uuid4", no_urandom)

    generated = {ids.generate_id() for _ in range(50)}

    assert len(generated) == 50
    assert all(len(v) == 26 and v.isalnum() for v in generated)
