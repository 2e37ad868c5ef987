# tests/test_maker.py

from datetime import datetime

import pytest

from dirstamp.config.settings import NamingConfig
from dirstamp.maker import DirMaker, NameRequest
from dirstamp.naming.identifier import InvalidDateFormat


def fixed_clock(second=7):
	return lambda: datetime(2022, 6, 16, 14, 30, second, 250_000)


@pytest.fixture()
def maker(tmp_path):
	return DirMaker(NamingConfig(base_directory=tmp_path / "notes"), clock=fixed_clock())


def test_make_creates_base_and_named_directory(maker, tmp_path):
	request = NameRequest(
		title="My Cool Idea!",
		keywords=("3D Models", "wip"),
		timestamp=datetime(2022, 6, 16, 14, 30, 0),
	)
	created = maker.make(request)
	assert created == (tmp_path / "notes" / "20220616T143000--my-cool-idea__3d-models_wip").resolve()
	assert created.is_dir()


def test_now_is_used_without_date(maker):
	assert maker.name_for(NameRequest()) == "20220616T143007"


def test_date_text_gets_current_seconds(maker):
	name = maker.name_for(NameRequest(title="Log", date="2022-06-16"))
	assert name == "20220616T000007--log"


def test_timestamp_wins_over_date(maker):
	request = NameRequest(date="2000-01-01", timestamp=datetime(2022, 6, 16, 1, 2, 3))
	assert maker.name_for(request) == "20220616T010203"


def test_request_base_dir_overrides_config(maker, tmp_path):
	other = tmp_path / "elsewhere"
	created = maker.make(NameRequest(title="x").in_dir(other))
	assert created.parent == other.resolve()
	assert not (tmp_path / "notes").exists()


def test_relative_request_base_dir_uses_cwd(maker, tmp_path, monkeypatch):
	monkeypatch.chdir(tmp_path)
	created = maker.make(NameRequest(title="x").in_dir("sub"))
	assert created.parent == (tmp_path / "sub").resolve()
	assert not (tmp_path / "notes").exists()


def test_same_request_twice_fails(maker):
	request = NameRequest(title="same")
	maker.make(request)
	with pytest.raises(FileExistsError):
		maker.make(request)


def test_invalid_date_creates_nothing(maker, tmp_path):
	with pytest.raises(InvalidDateFormat):
		maker.make(NameRequest(date="2022-13-40"))
	assert not (tmp_path / "notes").exists()


def test_config_options_reach_the_name(tmp_path):
	config = NamingConfig(base_directory=tmp_path, allow_multi_word_keywords=False, sort_keywords=False)
	maker = DirMaker(config, clock=fixed_clock(0))
	assert maker.name_for(NameRequest(keywords=("wip", "3D Models"))) == "20220616T143000__wip_3dmodels"


def test_dry_run_maker(tmp_path):
	maker = DirMaker(NamingConfig(base_directory=tmp_path / "notes"), dry_run=True, clock=fixed_clock())
	created = maker.make(NameRequest(title="plan"))
	assert created.name == "20220616T143007--plan"
	assert not (tmp_path / "notes").exists()


def test_name_request_builders():
	base = NameRequest(title="a")
	req = base.with_keywords("x").with_keywords("y", "z").with_title("b").with_date("2022-06-16")
	assert req.keywords == ("x", "y", "z")
	assert req.title == "b"
	assert req.date == "2022-06-16"
	assert base.keywords == ()


def test_name_request_single_keyword_string():
	assert NameRequest(keywords="wip").keywords == ("wip",)
	assert NameRequest(keywords=["a", "b"]).keywords == ("a", "b")
