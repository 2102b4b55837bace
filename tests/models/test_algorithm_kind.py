import pytest

from models.algorithm_kind import HashAlgorithmKind


@pytest.mark.parametrize("kind, size", [
    (HashAlgorithmKind.SHA1, 20),
    (HashAlgorithmKind.SHA256, 32),
    (HashAlgorithmKind.SHA512, 64),
    (HashAlgorithmKind.MD5, 16),
])
def test_digest_sizes(kind, size):
    assert kind.digest_size == size


@pytest.mark.parametrize("name", ["sha256", "SHA256", "Sha256"])
def test_from_name_is_case_insensitive(name):
    assert HashAlgorithmKind.from_name(name) is HashAlgorithmKind.SHA256


def test_from_name_passes_members_through():
    assert HashAlgorithmKind.from_name(HashAlgorithmKind.MD5) is HashAlgorithmKind.MD5


@pytest.mark.parametrize("name", ["sha384", "blake2", "", 5, None])
def test_from_name_rejects_unknown(name):
    with pytest.raises(ValueError):
        HashAlgorithmKind.from_name(name)
