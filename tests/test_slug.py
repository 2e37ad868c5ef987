# tests/test_slug.py

import re

import pytest

from dirstamp.naming.slug import (
	EXCLUDED_PUNCTUATION,
	collapse_hyphens,
	hyphenate,
	keep_allowed,
	slugify,
	strip_excluded,
	trim_hyphens,
)

SLUG_RX = re.compile(r"[^\W_]+(?:-[^\W_]+)*")

AWKWARD_INPUTS = [
	"My Cool Idea!",
	"  Hello__World  ",
	"a - b",
	"--leading and trailing--",
	"__init__",
	"tab\tseparated\nlines",
	"[Draft] {v2}: notes/ideas",
	"“Quoted” ’single’ `tick`",
	"a<b>c\\d",
	"emoji 🚀 launch",
	"İstanbul",
	"Crème Brûlée",
	"!!!",
	"",
	"   ",
	"x",
]


def test_scenario_title():
	assert slugify("My Cool Idea!") == "my-cool-idea"


@pytest.mark.parametrize(
	"text, expected",
	[
		("  Hello__World  ", "hello-world"),
		("a - b", "a-b"),
		("--leading and trailing--", "leading-and-trailing"),
		("[Draft] {v2}: notes/ideas", "draft-v2-notesideas"),
		("under_score", "under-score"),
		("a<b>c", "abc"),
		("Crème Brûlée", "crème-brûlée"),
		("emoji 🚀 launch", "emoji-launch"),
	],
)
def test_slugify_examples(text, expected):
	assert slugify(text) == expected


@pytest.mark.parametrize("text", ["", "!!!", "   ", "?.,;:", "_ _ _", "“”’"])
def test_slugify_reduces_to_empty(text):
	assert slugify(text) == ""


def test_single_word_removes_hyphens():
	assert slugify("3D Models", allow_multi_word=False) == "3dmodels"
	assert slugify("3D Models") == "3d-models"


def test_extra_pattern_is_stripped_too():
	assert slugify("Plan 2024", extra_pattern=r"[0-9]") == "plan"
	assert slugify("a&b", extra_pattern=re.compile("b")) == "a"


def test_invalid_extra_pattern_raises_value_error():
	with pytest.raises(ValueError):
		slugify("text", extra_pattern="[")


@pytest.mark.parametrize("text", AWKWARD_INPUTS)
@pytest.mark.parametrize("multi_word", [True, False])
def test_output_alphabet_and_idempotence(text, multi_word):
	once = slugify(text, allow_multi_word=multi_word)
	assert once == "" or SLUG_RX.fullmatch(once)
	assert once == once.lower()
	assert slugify(once, allow_multi_word=multi_word) == once


def test_passes_individually():
	assert strip_excluded(EXCLUDED_PUNCTUATION + "ok") == "ok"
	assert keep_allowed("a<b> c_d-e") == "ab c_d-e"
	assert hyphenate("a  b__c \t_d") == "a-b-c-d"
	assert collapse_hyphens("a---b--c-d") == "a-b-c-d"
	assert trim_hyphens("-a-b-") == "a-b"
