import hashlib
import json
import sys
import pytest

from cli.digest import digest
from models.digest_settings import DigestSettings
from models.encoding_kind import EncodingKind


@pytest.fixture
def ctx_obj():
    """Context object as built by the main group."""
    return {"config": {}, "settings": DigestSettings()}


@pytest.mark.parametrize("algorithm", ["sha1", "sha256", "sha512", "md5"])
def test_digest_abc_hex(runner, ctx_obj, abc_hex, algorithm):
    result = runner.invoke(digest, ["-a", algorithm, "abc"], obj=ctx_obj)
    assert result.exit_code == 0
    assert result.output == abc_hex[algorithm] + "\n"


def test_digest_without_chunks_is_empty_message(runner, ctx_obj, empty_hex):
    result = runner.invoke(digest, ["--algorithm", "SHA1"], obj=ctx_obj)
    assert result.exit_code == 0
    assert result.output.strip() == empty_hex["sha1"]


def test_chunks_are_concatenated(runner, ctx_obj, abc_hex):
    result = runner.invoke(digest, ["-a", "sha256", "a", "b", "c"], obj=ctx_obj)
    assert result.output.strip() == abc_hex["sha256"]


@pytest.mark.parametrize("selector", ["base64", "BASE64", "1"])
def test_encoding_selector(runner, ctx_obj, selector):
    result = runner.invoke(digest, ["-a", "md5", "-e", selector], obj=ctx_obj)
    assert result.exit_code == 0
    assert result.output.strip() == "1B2M2Y8AsgTpgAmY7PhCfg=="


def test_default_encoding_from_settings(runner, abc_hex):
    obj = {"config": {}, "settings": DigestSettings(default_encoding=EncodingKind.BASE64)}
    result = runner.invoke(digest, ["-a", "sha256"], obj=obj)
    assert result.output.strip() == "47DEQpj8HBSa+/TImW+5JCeuQeRkm5NMpJWZG3hSuFU="


def test_runs_without_context_object(runner, abc_hex):
    result = runner.invoke(digest, ["-a", "md5", "abc"])
    assert result.exit_code == 0
    assert result.output.strip() == abc_hex["md5"]


@pytest.mark.parametrize("selector", ["rot13", "7", "²"])
def test_invalid_encoding_fails(runner, ctx_obj, selector):
    result = runner.invoke(digest, ["-a", "sha256", "-e", selector, "abc"], obj=ctx_obj)
    assert result.exit_code == 1
    assert "Invalid encoding" in result.output


def test_utf8_encoding_fails_for_binary_digest(runner, ctx_obj, caplog):
    with caplog.at_level("ERROR"):
        result = runner.invoke(digest, ["-a", "sha256", "-e", "utf8"], obj=ctx_obj)
    assert result.exit_code == 1
    assert "NonUtf8DigestError" in caplog.text


def test_unknown_algorithm_is_a_usage_error(runner, ctx_obj):
    result = runner.invoke(digest, ["-a", "sha384", "abc"], obj=ctx_obj)
    assert result.exit_code == 2


def test_json_output(runner, ctx_obj, abc_hex):
    result = runner.invoke(digest, ["-a", "sha1", "--json", "ab", "c"], obj=ctx_obj)
    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload == {
        "algorithm": "sha1",
        "encoding": "hex",
        "digest": abc_hex["sha1"],
        "digest_size": 20,
        "chunks": 2,
        "bytes_hashed": 3,
    }


def test_logs_summary(runner, ctx_obj, caplog):
    with caplog.at_level("INFO"):
        runner.invoke(digest, ["-a", "sha256", "abc", "é"], obj=ctx_obj)
    assert "Hashed 2 chunks (5 bytes) with sha256" in caplog.text


@pytest.mark.skipif(sys.platform == "win32", reason="surrogate-escaped argv is POSIX only")
def test_non_utf8_argv_bytes_are_hashed_as_received(runner, ctx_obj):
    # click hands undecodable argv bytes over as surrogate escapes
    result = runner.invoke(digest, ["-a", "sha256", "ab\udcff"], obj=ctx_obj)
    assert result.exit_code == 0
    assert result.output.strip() == hashlib.sha256(b"ab\xff").hexdigest()
