from __future__ import annotations

import pytest

from softsel.domain.model import (
    Product,
    ReleaseNotesFormat,
    ResolvableKind,
    ResolvableStatus,
    TransactBy,
)
from tests.helpers.resolver import (
    FakeLicenseSource,
    FakeReleaseNotesSource,
    FakeResolver,
    make_record,
)

BASE_ATTRS: dict[str, str] = {
    "name": "openSUSE",
    "version": "20160405",
    "arch": "x86_64",
    "category": "addon",
    "vendor": "openSUSE",
}


@pytest.fixture
def product() -> Product:
    return Product(**BASE_ATTRS)


def test_products_with_same_identity_are_equal(product: Product) -> None:
    other = Product(**{**BASE_ATTRS, "category": "base", "display_name": "openSUSE Tumbleweed"})

    assert product == other
    assert hash(product) == hash(other)


@pytest.mark.parametrize(
    ("attribute", "value"),
    [
        ("name", "other"),
        ("version", "20160409"),
        ("arch", "i586"),
        ("vendor", "SUSE"),
    ],
)
def test_products_differing_in_identity_are_not_equal(
    product: Product,
    attribute: str,
    value: str,
) -> None:
    assert product != Product(**{**BASE_ATTRS, attribute: value})


def test_label_prefers_display_name() -> None:
    product = Product(name="NAME", display_name="DISPLAY", short_name="SHORT")

    assert product.label() == "DISPLAY"


def test_label_falls_back_to_short_name_then_name() -> None:
    assert Product(name="NAME", short_name="SHORT").label() == "SHORT"
    assert Product(name="NAME").label() == "NAME"
    assert Product(name="NAME", display_name="", short_name="").label() == "NAME"


def test_from_record_copies_attributes() -> None:
    record = make_record(
        "SLES",
        version="15",
        arch="x86_64",
        vendor="SUSE",
        category="base",
        display_name="SUSE Linux Enterprise Server 15",
        source=0,
    )

    product = Product.from_record(record)

    assert product == Product(name="SLES", version="15", arch="x86_64", vendor="SUSE")
    assert product.category == "base"
    assert product.source == 0
    assert product.label() == "SUSE Linux Enterprise Server 15"


@pytest.mark.parametrize(
    ("status", "selected", "installed"),
    [
        (ResolvableStatus.SELECTED, True, False),
        (ResolvableStatus.INSTALLED, False, True),
        (ResolvableStatus.AVAILABLE, False, False),
        (ResolvableStatus.NONE, False, False),
    ],
)
def test_selected_and_installed_query_the_resolver(
    product: Product,
    status: ResolvableStatus,
    selected: bool,
    installed: bool,
) -> None:
    resolver = FakeResolver.with_products(make_record(product.name, status=status))

    assert product.is_selected(resolver) is selected
    assert product.is_installed(resolver) is installed
    assert resolver.calls[0] == ("query", "openSUSE", ResolvableKind.PRODUCT)


def test_has_status_matches_any_record(product: Product) -> None:
    resolver = FakeResolver.with_products(
        make_record("openSUSE", status=ResolvableStatus.REMOVED),
        make_record("openSUSE", status=ResolvableStatus.SELECTED),
    )

    assert product.has_status(resolver, ResolvableStatus.INSTALLED, ResolvableStatus.SELECTED)
    assert not product.has_status(resolver, ResolvableStatus.INSTALLED)
    assert product.statuses(resolver) == (ResolvableStatus.REMOVED, ResolvableStatus.SELECTED)


def test_status_of_unknown_product_is_none(product: Product) -> None:
    resolver = FakeResolver()

    assert product.status(resolver) is ResolvableStatus.NONE
    assert product.transact_by(resolver) is TransactBy.NONE


def test_select_and_restore_send_requests(product: Product) -> None:
    resolver = FakeResolver.with_products(make_record("openSUSE"))

    assert product.select(resolver)
    assert product.restore(resolver)

    assert [op for op, _, _ in resolver.calls] == ["select", "set_neutral"]
    assert product.status(resolver) is ResolvableStatus.SELECTED
    assert product.transact_by(resolver) is TransactBy.APP_HIGH


def test_license_returns_text(product: Product) -> None:
    licenses = FakeLicenseSource(texts={("openSUSE", "en_US"): "license content"})

    assert product.license(licenses, "en_US") == "license content"
    assert product.has_license(licenses, "en_US")


def test_license_for_product_without_license(product: Product) -> None:
    licenses = FakeLicenseSource(texts={("openSUSE", "en_US"): ""})

    assert product.license(licenses, "en_US") == ""
    assert not product.has_license(licenses, "en_US")


def test_license_for_unknown_product(product: Product) -> None:
    licenses = FakeLicenseSource()

    assert product.license(licenses, "en_US") is None
    assert not product.has_license(licenses, "en_US")


def test_license_ignores_language_environment(
    product: Product,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("SOFTSEL_LANGUAGE", "C")
    licenses = FakeLicenseSource(texts={("openSUSE", "de_DE"): "Lizenz"})

    assert product.license(licenses, "de_DE") == "Lizenz"
    assert licenses.requested == [("openSUSE", "de_DE")]


def test_license_confirmation(product: Product) -> None:
    licenses = FakeLicenseSource(required={"openSUSE"})

    assert product.license_confirmation_required(licenses)
    assert not product.license_confirmed(licenses)

    product.set_license_confirmation(licenses, True)
    assert product.license_confirmed(licenses)

    product.set_license_confirmation(licenses, False)
    assert not product.license_confirmed(licenses)


def test_release_notes_default_to_plain_text(product: Product) -> None:
    source = FakeReleaseNotesSource(
        notes={("openSUSE", "en_US", ReleaseNotesFormat.TXT): "Release Notes"}
    )

    assert product.release_notes(source, "en_US") == "Release Notes"
    assert source.requested == [("openSUSE", "en_US", ReleaseNotesFormat.TXT)]


def test_release_notes_in_given_language_and_format(product: Product) -> None:
    source = FakeReleaseNotesSource(
        notes={("openSUSE", "de_DE", ReleaseNotesFormat.RTF): "{\\rtf1 Versionshinweise}"}
    )

    assert product.release_notes(source, "de_DE", ReleaseNotesFormat.RTF) == (
        "{\\rtf1 Versionshinweise}"
    )


def test_missing_release_notes(product: Product) -> None:
    assert product.release_notes(FakeReleaseNotesSource(), "en_US") is None
