import pytest

import schrott_base64
import schrott_permutation
from schrott_alphabets import BASE32, BASE64
from schrott_errors import InvalidAlphabet, InvalidFormat, InvalidPermutation
from schrott_id import SchrottId


def test_generated_permutations_are_complete():
    # randomness: loop to cover as many shuffles as practical
    for _ in range(1000):
        raw = schrott_base64.decode(SchrottId.generate_permutation(BASE64))
        assert len(raw) == len(BASE64)
        assert len(set(raw)) == len(raw)
        assert min(raw) == 0
        assert max(raw) == len(BASE64) - 1


@pytest.mark.parametrize("size", [2, 3, 58, 255, 256])
def test_generated_permutation_sizes(size):
    alphabet = "".join(map(chr, range(size)))
    raw = schrott_base64.decode(schrott_permutation.generate_permutation(alphabet))
    assert sorted(raw) == list(range(size))


def test_scripted_source_is_used(make_rng):
    rng = make_rng([0])
    # identity [0,1,2,3] with every swap partner 0 -> [3,0,1,2]
    assert schrott_permutation.generate_permutation("ABCD", rng) == "AwABAg=="
    assert rng.calls == [4, 4, 4, 4]


def test_static_method_forwards_rng(make_rng):
    rng = make_rng([0])
    assert SchrottId.generate_permutation("ABCD", rng=rng) == "AwABAg=="


def test_identity_when_source_picks_current_index(make_rng):
    rng = make_rng(range(8))
    raw = schrott_base64.decode(schrott_permutation.generate_permutation("abcdefgh", rng))
    assert list(raw) == list(range(8))


def test_shuffle_in_place_swaps_every_position(make_rng):
    buf = [0, 1, 2]
    schrott_permutation.shuffle_in_place(buf, make_rng([2]))
    # i=0 <-> 2: [2,1,0]; i=1 <-> 2: [2,0,1]; i=2 <-> 2: [2,0,1]
    assert buf == [2, 0, 1]


def test_secrets_source_range():
    src = schrott_permutation.SecretsIndexSource()
    seen = {src.randbelow(5) for _ in range(500)}
    assert seen <= set(range(5))
    assert len(seen) > 1


@pytest.mark.parametrize("alphabet, reason", [
    ("A", "size"),
    ("A" * 257, "size"),
    ("A" * 256, "duplicate"),
    ("abca", "duplicate"),
])
def test_generate_rejects_bad_alphabet(alphabet, reason):
    with pytest.raises(InvalidAlphabet) as ei:
        schrott_permutation.generate_permutation(alphabet)
    assert ei.value.reason == reason


def test_parse_returns_forward_and_inverse():
    perm, inv = schrott_permutation.parse_permutation(schrott_base64.encode(bytes([2, 0, 3, 1])), 4)
    assert perm == (2, 0, 3, 1)
    assert inv == (1, 3, 0, 2)
    for i, v in enumerate(perm):
        assert inv[v] == i


def test_parse_round_trips_generated():
    text = schrott_permutation.generate_permutation(BASE32)
    perm, inv = schrott_permutation.parse_permutation(text, len(BASE32))
    assert schrott_base64.encode(bytes(perm)) == text
    assert [perm[i] for i in inv] == list(range(len(BASE32)))


@pytest.mark.parametrize("raw, reason", [
    (bytes([0, 1, 2]), "length_mismatch"),
    (bytes([0, 1, 2, 3, 4]), "length_mismatch"),
    (bytes([0, 0, 1, 2]), "not_unique"),
    (bytes([1, 1, 1, 1]), "not_unique"),
    (bytes([1, 2, 3, 4]), "out_of_range"),
    (bytes([0, 1, 2, 200]), "out_of_range"),
])
def test_parse_rejects(raw, reason):
    with pytest.raises(InvalidPermutation) as ei:
        schrott_permutation.parse_permutation(schrott_base64.encode(raw), 4)
    assert ei.value.reason == reason


def test_parse_propagates_format_errors():
    with pytest.raises(InvalidFormat):
        schrott_permutation.parse_permutation("AwA", 4)
