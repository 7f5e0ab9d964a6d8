import pytest

from naturaliza.domain import Gazette, SearchDate


def test_listing_url_fills_date_and_section():
    gazette = Gazette(
        listing_url_template="https://www.in.gov.br/leiturajornal?secao={section}&data={date}"
    )

    url = gazette.listing_url_for(SearchDate("10-05-2024"))

    assert url == "https://www.in.gov.br/leiturajornal?secao=dou1&data=10-05-2024"


def test_listing_url_accepts_template_without_section():
    gazette = Gazette(listing_url_template="https://example.com/jornal/{date}", section="dou2")

    assert gazette.listing_url_for(SearchDate("01-02-2023")) == "https://example.com/jornal/01-02-2023"


def test_listing_url_requires_date_placeholder():
    gazette = Gazette(listing_url_template="https://example.com/jornal?secao={section}")

    with pytest.raises(ValueError) as excinfo:
        gazette.listing_url_for(SearchDate("01-02-2023"))

    assert "{date}" in str(excinfo.value)


def test_listing_url_rejects_unknown_placeholders():
    gazette = Gazette(
        listing_url_template="https://example.com/jornal?data={date}&edicao={edition}"
    )

    with pytest.raises(ValueError) as excinfo:
        gazette.listing_url_for(SearchDate("01-02-2023"))

    assert "{edition}" in str(excinfo.value)
