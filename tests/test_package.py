# tests/test_package.py

import pytest

import dirstamp


def test_lazy_exports():
	assert dirstamp.slugify("A B") == "a-b"
	assert dirstamp.DirMaker.__name__ == "DirMaker"
	assert dirstamp.NamingConfig().sort_keywords is True
	assert dirstamp.naming.assemble_name("20220616T143000") == "20220616T143000"
	assert dirstamp.fs.Create.__name__ == "Create"


def test_unknown_attribute():
	with pytest.raises(AttributeError):
		dirstamp.does_not_exist  # noqa: B018
	with pytest.raises(AttributeError):
		dirstamp.naming.does_not_exist  # noqa: B018
