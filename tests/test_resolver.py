import threading

import pytest

from communicate.utils.naming import (
    CapitalizationOptions,
    InvalidArgument,
    NamingConfig,
    StandardNameResolver,
    WordSplitOptions,
    resolve_name,
    split_words,
)
from communicate.utils.naming.resolver import (
    split_acronyms,
    split_camel_case,
    split_underscore,
)

Split = WordSplitOptions
Caps = CapitalizationOptions


@pytest.mark.parametrize(
    "split, caps, delimiter, identifier, expected",
    [
        (Split.SPLIT_UNDERSCORE, Caps.PRESERVE_ORIGINAL, "-", "Foo_BAR", "Foo-BAR"),
        (Split.SPLIT_CAMEL_CASE, Caps.PRESERVE_ORIGINAL, "-", "FooBar", "Foo-Bar"),
        (Split.SPLIT_ACRONYMS, Caps.PRESERVE_ORIGINAL, "-", "FOObarBAZ", "FOO-bar-BAZ"),
        (Split.SPLIT_UNDERSCORE, Caps.PRESERVE_ORIGINAL, "-", "fOo_BaR_BAZ", "fOo-BaR-BAZ"),
        (Split.SPLIT_UNDERSCORE, Caps.ALL_LOWERCASE, "-", "fOo_BaR_BAZ", "foo-bar-baz"),
        (Split.SPLIT_UNDERSCORE, Caps.ALL_UPPERCASE, "-", "fOo_BaR_BAZ", "FOO-BAR-BAZ"),
        (Split.SPLIT_UNDERSCORE, Caps.CAMEL_CASE, "-", "fOo_BaR_BAZ", "foo-Bar-Baz"),
        (Split.SPLIT_UNDERSCORE, Caps.CAMEL_CASE_WITH_ACRONYMS, "-", "fOo_BaR_BAZ", "foo-Bar-BAZ"),
        (Split.SPLIT_UNDERSCORE, Caps.PASCAL_CASE, "-", "fOo_BaR_BAZ", "Foo-Bar-Baz"),
        (Split.SPLIT_UNDERSCORE, Caps.PASCAL_CASE_WITH_ACRONYMS, "-", "fOo_BaR_BAZ", "Foo-Bar-BAZ"),
        (Split.SPLIT_UNDERSCORE, Caps.PRESERVE_ORIGINAL, None, "fOo_BaR_BAZ", "fOoBaRBAZ"),
        (Split.SPLIT_UNDERSCORE, Caps.PRESERVE_ORIGINAL, "", "fOo_BaR_BAZ", "fOoBaRBAZ"),
        (Split.SPLIT_UNDERSCORE, Caps.PRESERVE_ORIGINAL, "moo", "fOo_BaR_BAZ", "fOomooBaRmooBAZ"),
    ],
)
def test_resolve_name(split, caps, delimiter, identifier, expected):
    resolver = StandardNameResolver(split, caps, delimiter)

    assert resolver.resolve_name(identifier) == expected
    assert resolver(identifier) == expected
    assert resolve_name(identifier, resolver.config) == expected


def test_none_identifier_is_rejected():
    """Resolving nothing names the identifier parameter"""
    with pytest.raises(InvalidArgument) as exc_info:
        StandardNameResolver().resolve_name(None)

    assert exc_info.value.param_name == "identifier"


def test_defaults_split_everything_into_lowercase_snake_case():
    resolver = StandardNameResolver()

    assert resolver.word_split_options == Split.ALL
    assert resolver.capitalization_options == Caps.ALL_LOWERCASE
    assert resolver.word_delimiter == "_"
    assert resolver("IsCSSNoob") == "is_css_noob"
    assert resolve_name("IsCSSNoob") == "is_css_noob"


def test_rules_apply_to_words_of_previous_rule():
    """Underscore, then camel case, then acronyms"""
    config = NamingConfig(word_delimiter="-")

    assert split_words("HTMLDeveloper_fooBar", config) == [
        "HTML",
        "Developer",
        "foo",
        "Bar",
    ]
    assert resolve_name("HTMLDeveloper_fooBar", config) == (
        "html-developer-foo-bar"
    )


def test_no_split_rules_keep_identifier_whole():
    config = NamingConfig(word_split_options=Split.NONE)

    assert split_words("Foo_BarBAZ", config) == ["Foo_BarBAZ"]
    assert resolve_name("Foo_BarBAZ", config) == "foo_barbaz"


def test_split_underscore_drops_empty_pieces():
    assert split_underscore("__foo__bar_") == ["foo", "bar"]
    assert split_underscore("") == []


def test_split_camel_case():
    assert split_camel_case("FooBar") == ["Foo", "Bar"]
    assert split_camel_case("fooBar") == ["foo", "Bar"]
    assert split_camel_case("fooB") == ["fooB"]
    assert split_camel_case("FOO") == ["FOO"]
    assert split_camel_case("") == [""]


def test_split_acronyms_absorbs_following_character():
    assert split_acronyms("FOObarBAZ") == ["FOO", "bar", "BAZ"]
    assert split_acronyms("HTMLDeveloper") == ["HTMLD", "eveloper"]
    assert split_acronyms("IsCSS") == ["Is", "CSS"]
    assert split_acronyms("lower") == ["lower"]


def test_split_acronyms_at_run_end():
    assert split_acronyms("HTMLDeveloper", absorb_next=False) == [
        "HTML",
        "Developer",
    ]
    assert split_acronyms("FOObarBAZ", absorb_next=False) == [
        "FO",
        "Obar",
        "BAZ",
    ]


def test_acronym_flag_on_config():
    absorbing = StandardNameResolver(Split.SPLIT_ACRONYMS, Caps.PRESERVE_ORIGINAL, "-")
    at_run_end = StandardNameResolver(
        Split.SPLIT_ACRONYMS,
        Caps.PRESERVE_ORIGINAL,
        "-",
        acronym_absorbs_next=False,
    )

    assert absorbing("HTMLDeveloper") == "HTMLD-eveloper"
    assert at_run_end("HTMLDeveloper") == "HTML-Developer"


def test_empty_identifier():
    assert StandardNameResolver()("") == ""
    camel = StandardNameResolver(Split.SPLIT_CAMEL_CASE, Caps.CAMEL_CASE, None)
    assert camel("") == ""


def test_acronym_capitalization_keeps_digits_only_words():
    resolver = StandardNameResolver(
        Split.SPLIT_UNDERSCORE, Caps.PASCAL_CASE_WITH_ACRONYMS, ""
    )

    assert resolver("version_2_api") == "Version2Api"


def test_resolvers_compare_by_config():
    assert StandardNameResolver() == StandardNameResolver()
    assert hash(StandardNameResolver()) == hash(StandardNameResolver())
    assert StandardNameResolver() != StandardNameResolver(word_delimiter="-")
    assert StandardNameResolver.from_config(NamingConfig()) == (
        StandardNameResolver()
    )


def test_resolver_is_shared_between_threads():
    resolver = StandardNameResolver()
    results = []

    def worker():
        results.append(resolver("IsCSSNoob"))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results == ["is_css_noob"] * 8
