"""Shared pytest fixtures for isomorph tests."""

from __future__ import annotations

import pytest

# Wheatstone disk ciphertext; the plaintext repeats several phrases such as
# "ribonucleic_acid_strands", which surface as isomorphs.
WHEATSTONE_CIPHERTEXT = (
    "nbtwwpfqbjmfxbqimdodigqzajzscnfhnlyykcjzbtpdoaeywm"
    "oqqyvcmaxvfmclxrdrlpctiazajjxkdzdnlysdfkhhlaludqcg"
    "driwvvoyevspmpqyrwyybfswtnjnsoiafgsvvaezgopeygzrpu"
    "unzsrdsfoxrfivsaiimcprbtswhtaqdzzkxvvvydfrhyycdqpo"
    "edtcsumjrhbxtfvplfejmonmphunjkovcipgkgnbdemmqgxdvr"
    "gudxtrketheiyppbpvrgmlwkmtpcqoivhscehtelrekymgueqz"
    "owtunbtwwpfqbjmfxbqimdodigqzavtksgyqnirghjrawdlrog"
    "jvrdjlqwotvixyzdcucqhxpupocspolkgiaaozonkxfwkstmpp"
    "hcjplqbusmcc"
)


@pytest.fixture
def ciphertext() -> str:
    """Ciphertext produced by a Wheatstone cryptograph."""
    return WHEATSTONE_CIPHERTEXT
