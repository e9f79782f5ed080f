import pytest

from textnorm.core.stemming.rules.common import reduce_double_consonant
from textnorm.core.stemming.rules.english import stem_english
from textnorm.core.stemming.rules.portuguese import stem_portuguese
from textnorm.core.stemming.rules.spanish import stem_spanish


# -------------------------------------
# English
# -------------------------------------
@pytest.mark.parametrize(
    "word, expected",
    [
        ("cats", "cat"),
        ("dresses", "dress"),
        ("ponies", "pony"),
        ("running", "run"),
        ("tested", "test"),
        ("jumps", "jump"),
        ("hoped", "hop"),
        ("make", "mak"),
        ("modernization", "modernize"),
        ("rational", "rate"),
        ("gracefulness", "graceful"),
        ("hazardousness", "hazardous"),
        ("fall", "fall"),
        ("buzz", "buzz"),
        ("matt", "mat"),
        ("at", "at"),
    ],
)
def test_english(word, expected, en_stemmer):
    assert en_stemmer.stem(word) == expected


def test_english_ing_needs_a_vowel_in_the_stem():
    assert stem_english("sing") == "sing"
    assert stem_english("bring") == "bring"


def test_english_hyphenated_word_never_grows():
    word = "pre-processing"
    assert stem_english(word) == "pre-process"
    assert len(stem_english(word)) <= len(word)


def test_english_is_case_insensitive_through_the_stemmer(en_stemmer):
    assert en_stemmer.stem("Dresses") == "dress"


# -------------------------------------
# Spanish
# -------------------------------------
@pytest.mark.parametrize(
    "word, expected",
    [
        ("gatos", "gato"),
        ("luces", "luz"),
        ("naciones", "nacion"),
        ("caminando", "camin"),
        ("comiendo", "comi"),
        ("hablado", "habl"),
        ("corrido", "cor"),
        ("hablar", "habl"),
        ("comer", "com"),
        ("vivir", "viv"),
        ("rápidamente", "rápida"),
        ("felizmente", "feliz"),
        ("clase", "clas"),
        ("sol", "sol"),
        ("luz", "luz"),
        ("paz", "paz"),
    ],
)
def test_spanish(word, expected, es_stemmer):
    assert es_stemmer.stem(word) == expected


# -------------------------------------
# Portuguese
# -------------------------------------
@pytest.mark.parametrize(
    "word, expected",
    [
        ("limões", "limão"),
        ("cães", "cão"),
        ("casas", "casa"),
        ("falando", "fal"),
        ("comendo", "com"),
        ("partindo", "part"),
        ("falado", "fal"),
        ("falar", "fal"),
        ("comer", "com"),
        ("partir", "part"),
        ("rapidamente", "rapida"),
        ("felizmente", "feliz"),
        ("paz", "paz"),
        ("sol", "sol"),
        ("luz", "luz"),
    ],
)
def test_portuguese(word, expected, pt_stemmer):
    assert pt_stemmer.stem(word) == expected


def test_portuguese_stem_words(pt_stemmer):
    assert pt_stemmer.stem_words(["falando", "comendo", "partindo"]) == [
        "fal",
        "com",
        "part",
    ]


def test_portuguese_counts_accented_vowels():
    # only an accented vowel precedes the final "e"
    assert stem_portuguese("xãxe") == "xãx"
    assert stem_spanish("xãxe") == "xãxe"


# -------------------------------------
# Shared behaviour
# -------------------------------------
@pytest.mark.parametrize("rules", [stem_english, stem_spanish, stem_portuguese])
@pytest.mark.parametrize("word", ["", "a", "as", "es", "ss"])
def test_words_under_three_chars_are_untouched(rules, word):
    assert rules(word) == word


@pytest.mark.parametrize(
    "word, expected",
    [("matt", "mat"), ("egg", "eg"), ("fall", "fall"), ("class", "class"), ("ab", "ab")],
)
def test_double_consonant_reduction(word, expected):
    assert reduce_double_consonant(word) == expected
