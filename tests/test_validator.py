"""Tests for the validation pipeline."""
from __future__ import annotations

import threading
from pathlib import Path

import pytest

from pwsieve.breach import BreachClient
from pwsieve.config import ValidatorOptions, recommended_options
from pwsieve.dictionary.index import DictionaryIndex
from pwsieve.dictionary.matcher import NO_MATCH, MatchKind, MatchResult
from pwsieve.errors import (
    BreachedPasswordError,
    BreachLookupError,
    DictionaryError,
    EmptyPasswordError,
    HashedDictionaryError,
    MangledDictionaryError,
    RejectReason,
    TooFewCharsError,
    TooShortError,
    TooSystematicError,
    WeakPasswordError,
)
from pwsieve.hashing import COMMON_ALGORITHMS
from pwsieve.validator import Validator, check_structure, match_error

VALID = "d1924ce3d0510b2b2b4604c99453e2e1"


@pytest.mark.parametrize(
    ("password", "expected"),
    [
        ("", EmptyPasswordError),
        (" ", EmptyPasswordError),
        ("\t\n  ", EmptyPasswordError),
        ("K7#q!", TooShortError),
        ("aaaaaa", TooFewCharsError),
        ("abcddd", TooFewCharsError),
        ("aabbccdd", TooFewCharsError),
        ("123456", TooSystematicError),
        ("654321", TooSystematicError),
        ("abcdef", TooSystematicError),
        ("fedcba", TooSystematicError),
        ("12345678", TooSystematicError),
        ("hgfedcba", TooSystematicError),
    ],
)
def test_structural_rejections(validator: Validator, password: str, expected: type[WeakPasswordError]) -> None:
    verdict = validator.check(password)
    assert not verdict.accepted
    assert type(verdict.error) is expected


def test_empty_rejected_regardless_of_configuration() -> None:
    options = ValidatorOptions(min_length=0, min_unique_chars=0)
    with pytest.raises(EmptyPasswordError):
        check_structure("   ", options)


def test_length_counts_raw_characters() -> None:
    options = ValidatorOptions(min_length=8, min_unique_chars=0)
    with pytest.raises(TooShortError):
        check_structure(" xq7#! ", options)
    check_structure(" xq7#L! ", options)


def test_custom_systematic_rule() -> None:
    lenient = Validator(ValidatorOptions(max_systematic=lambda length: length))
    assert lenient.check("abcdef").accepted


def test_plain_dictionary_word(validator: Validator) -> None:
    with pytest.raises(DictionaryError) as excinfo:
        validator.validate("password")
    assert type(excinfo.value) is DictionaryError
    assert excinfo.value.word == "password"
    assert excinfo.value.reason is RejectReason.DICTIONARY

    assert type(validator.check("intoxicate").error) is DictionaryError


@pytest.mark.parametrize(
    ("password", "distance"),
    [
        ("PassWord", 0),
        ("drowssap", 0),
        ("p@ssw0rd", 2),
        ("!pass@word?", 3),
        ("?drow@ssap!", 3),
    ],
)
def test_mangled_dictionary_words(validator: Validator, password: str, distance: int) -> None:
    verdict = validator.check(password)
    assert isinstance(verdict.error, MangledDictionaryError)
    assert isinstance(verdict.error, DictionaryError)
    assert verdict.reason is RejectReason.MANGLED_DICTIONARY
    assert verdict.error.word == "password"
    assert verdict.error.distance == distance


@pytest.mark.parametrize(
    ("digest", "algorithm"),
    [
        ("5f4dcc3b5aa765d61d8327deb882cf99", "md5"),
        ("5baa61e4c9b93f3f0682250b6cf8331b7ee68fd8", "sha1"),
        ("5e884898da28047151d0e56f8dc6292773603d0d6aabbdd62a11ef721d1542d8", "sha256"),
        (
            "b109f3bbbc244eb82441917ed06d618b9008dd09b3befd1b5e07394c706a8bb9"
            "80b1d7785e5976ec049b46df5f1326af5a2ea6d103fd07c95385ffab0cacbc86",
            "sha512",
        ),
    ],
)
def test_hashed_dictionary_words(validator: Validator, digest: str, algorithm: str) -> None:
    verdict = validator.check(digest)
    assert isinstance(verdict.error, HashedDictionaryError)
    assert verdict.error.word == "password"
    assert verdict.error.algorithm == algorithm


def test_hashed_check_disabled_without_algorithms(words: str) -> None:
    plain = Validator(ValidatorOptions(dictionary_words=(words,)))
    assert plain.check("5f4dcc3b5aa765d61d8327deb882cf99").accepted


def test_fuzzy_check_disabled_with_negative_distance(words: str) -> None:
    strict = Validator(ValidatorOptions(dictionary_words=(words,), min_edit_distance=-1))
    assert strict.check("p@ssw0rd").accepted
    assert isinstance(strict.check("drowssap").error, MangledDictionaryError)


def test_random_digest_accepted_and_rated_full(validator: Validator) -> None:
    assert validator.check(VALID).accepted
    strength = validator.rate(VALID)
    assert strength.accepted
    assert strength.score == 100
    assert strength.level == "strong"


def test_long_single_class_password_rated_below_full() -> None:
    strength = Validator(ValidatorOptions()).rate("qwzmxkvbnrtyplhgfdsj" * 2 + "qwzmxkvb")
    assert strength.accepted
    assert strength.score < 100


def test_rate_rejected_password_scores_zero(validator: Validator) -> None:
    strength = validator.rate("p@ssw0rd")
    assert strength.score == 0
    assert isinstance(strength.error, MangledDictionaryError)
    assert not strength.accepted


def test_error_messages_do_not_echo_password(validator: Validator) -> None:
    for password in ("p@ssw0rd", "123456", "5f4dcc3b5aa765d61d8327deb882cf99"):
        error = validator.check(password).error
        assert error is not None
        assert password not in str(error)


def test_dictionary_comparison_is_case_folded() -> None:
    validator = Validator(dictionary=DictionaryIndex(["Straße"]))
    verdict = validator.check("STRASSE")
    assert isinstance(verdict.error, MangledDictionaryError)
    assert verdict.error.word == "strasse"


def test_match_error_translation() -> None:
    assert match_error(NO_MATCH) is None
    hashed = match_error(MatchResult(MatchKind.HASHED, word="password", algorithm="md5", mangled=True))
    assert isinstance(hashed, HashedDictionaryError)
    assert hashed.algorithm == "md5"
    assert type(match_error(MatchResult(MatchKind.EXACT, word="password", distance=0))) is DictionaryError


@pytest.mark.parametrize(
    "result",
    [
        MatchResult(MatchKind.EXACT),
        MatchResult(MatchKind.HASHED, word="password"),
    ],
)
def test_match_error_rejects_incomplete_results(result: MatchResult) -> None:
    with pytest.raises(ValueError):
        match_error(result)


def test_injected_prebuilt_index() -> None:
    validator = Validator(dictionary=DictionaryIndex(["hunter2xyz"]))
    assert type(validator.check("hunter2xyz").error) is DictionaryError


def test_dictionary_loaded_lazily_and_once(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    calls: list[Path] = []

    def _read(path: Path) -> list[str]:
        calls.append(path)
        return ["password\n"]

    monkeypatch.setattr("pwsieve.validator.read_dictionary_files", _read)
    validator = Validator(ValidatorOptions(dictionary_path=tmp_path))
    assert calls == []

    barrier = threading.Barrier(6)
    verdicts = []

    def _worker() -> None:
        barrier.wait()
        verdicts.append(validator.check("password"))

    threads = [threading.Thread(target=_worker) for _ in range(6)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert calls == [tmp_path]
    assert len(verdicts) == 6
    assert all(type(v.error) is DictionaryError for v in verdicts)


class TestBreachCheck:
    def test_breached_password_rejected(self) -> None:
        validator = Validator(ValidatorOptions(check_breach_db=True), breach_lookup=lambda _pw: True)
        verdict = validator.check(VALID)
        assert isinstance(verdict.error, BreachedPasswordError)
        assert verdict.reason is RejectReason.BREACHED

    def test_clean_password_accepted(self) -> None:
        validator = Validator(ValidatorOptions(check_breach_db=True), breach_lookup=lambda _pw: False)
        assert validator.check(VALID).accepted

    def test_lookup_failure_is_not_a_verdict(self) -> None:
        def _fail(_pw: str) -> bool:
            raise BreachLookupError("timed out")

        validator = Validator(ValidatorOptions(check_breach_db=True), breach_lookup=_fail)
        with pytest.raises(BreachLookupError):
            validator.check(VALID)
        with pytest.raises(BreachLookupError):
            validator.rate(VALID)

    def test_lookup_skipped_after_earlier_rejection(self, words: str) -> None:
        seen: list[str] = []
        validator = Validator(
            ValidatorOptions(dictionary_words=(words,), check_breach_db=True),
            breach_lookup=lambda pw: seen.append(pw) or True,
        )
        assert type(validator.check("password").error) is DictionaryError
        assert seen == []

    def test_lookup_not_called_when_disabled(self) -> None:
        seen: list[str] = []
        validator = Validator(breach_lookup=lambda pw: seen.append(pw) or True)
        assert validator.check(VALID).accepted
        assert seen == []

    def test_default_lookup_uses_breach_client(self, monkeypatch: pytest.MonkeyPatch) -> None:
        prefixes: list[str] = []

        def _fetch(self: BreachClient, prefix: str) -> str:
            prefixes.append(prefix)
            return "1E4C9B93F3F0682250B6CF8331B7EE68FD8:3\r\n"

        monkeypatch.setattr(BreachClient, "fetch_range", _fetch)
        validator = Validator(ValidatorOptions(check_breach_db=True))
        assert validator.check(VALID).accepted
        assert prefixes and len(prefixes[0]) == 5


def test_recommended_options() -> None:
    options = recommended_options()
    assert options.hash_algorithms == COMMON_ALGORITHMS
    assert options.dictionary_path is not None
    assert options.min_length == 6
    assert options.min_unique_chars == 5
    assert not options.check_breach_db


def test_options_overrides_and_validation() -> None:
    options = ValidatorOptions().with_overrides(min_length=12, hash_algorithms=list(COMMON_ALGORITHMS))
    assert options.min_length == 12
    assert isinstance(options.hash_algorithms, tuple)
    with pytest.raises(ValueError):
        ValidatorOptions(min_length=-1)


class TestDefaultBreachLookup:
    def test_client_created_and_closed_per_lookup(self, monkeypatch: pytest.MonkeyPatch) -> None:
        clients: list[FakeClient] = []

        class FakeClient:
            def __init__(self, endpoint: str, *, timeout: tuple[float, float]) -> None:
                self.endpoint = endpoint
                self.timeout = timeout
                self.closed = False
                clients.append(self)

            def query(self, password: str) -> bool:
                return False

            def __enter__(self) -> FakeClient:
                return self

            def __exit__(self, *args: object) -> None:
                self.closed = True

        monkeypatch.setattr("pwsieve.validator.BreachClient", FakeClient)
        options = ValidatorOptions(check_breach_db=True, breach_timeout=(1.0, 2.0))
        validator = Validator(options)
        assert validator.check(VALID).accepted
        assert validator.check(VALID).accepted

        assert len(clients) == 2
        assert all(client.closed for client in clients)
        assert clients[0].timeout == (1.0, 2.0)
        assert clients[0].endpoint == options.breach_endpoint

    def test_undecodable_password_reaches_lookup(self, monkeypatch: pytest.MonkeyPatch) -> None:
        prefixes: list[str] = []

        def _fetch(self: BreachClient, prefix: str) -> str:
            prefixes.append(prefix)
            return ""

        monkeypatch.setattr(BreachClient, "fetch_range", _fetch)
        validator = Validator(ValidatorOptions(check_breach_db=True))
        assert validator.check("xq7#Lm2!\udcff").accepted
        assert len(prefixes) == 1
        assert len(prefixes[0]) == 5
