import re

from importmaps.externals import apply_build_externals, merge_external_options


def test_merge_string_and_pattern():
    is_external = merge_external_options("a", re.compile(r"^b"))
    assert is_external("a", None, False)
    assert is_external("bxyz", None, False)
    assert not is_external("c", None, False)


def test_merge_list_of_strings_and_patterns():
    is_external = merge_external_options(["react", re.compile(r"^@team/")])
    assert is_external("react", None, False)
    assert is_external("@team/widget", None, False)
    assert not is_external("react-dom", None, False)


def test_merge_delegates_to_predicates():
    calls = []

    def predicate(source, importer, is_resolved):
        calls.append((source, importer, is_resolved))
        return source.endswith(".css")

    is_external = merge_external_options("x", predicate)
    assert is_external("theme.css", "/main.js", True)
    assert calls == [("theme.css", "/main.js", True)]
    assert is_external("x", None, False)
    assert not is_external("y", None, False)


def test_pattern_uses_search_semantics():
    assert merge_external_options(re.compile("dom"))("react-dom")


def test_merge_without_options_matches_nothing():
    assert not merge_external_options()("anything")
    assert not merge_external_options(None)("anything")


def test_build_externals_installed_as_is_when_absent():
    config = apply_build_externals({}, ["@a/b"], "build")
    assert config["build"]["rollupOptions"]["external"] == ["@a/b"]


def test_build_externals_merged_with_existing():
    config = {"build": {"rollupOptions": {"external": ["react"]}}}
    apply_build_externals(config, re.compile(r"^@"), "build")
    external = config["build"]["rollupOptions"]["external"]
    assert callable(external)
    assert external("react", None, False)
    assert external("@team/widget", None, False)
    assert not external("lodash", None, False)


def test_build_externals_ignored_when_serving():
    config = {}
    assert apply_build_externals(config, ["@a/b"], "serve") == {}
    assert apply_build_externals(config, None, "build") == {}
