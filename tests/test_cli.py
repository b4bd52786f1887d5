"""
Tests for the command-line interface.
"""

import asyncio

import pytest

from hotel_browser import cli
from hotel_browser.error_handling import HotelFetchError
from hotel_browser.models import FilterCriteria, Hotel


def make_hotels(count):
    return [
        Hotel(id=str(i), hotel_name=f"Hotel {i}", hotel_rating=4.0, city="Goa",
              hotel_price=1000 + i, feature_1="Pool")
        for i in range(count)
    ]


class FakeApiClient:
    """Replaces HotelApiClient inside cli.run_browse."""

    hotels = []
    error = None
    requests = []

    def __init__(self, base_url=None):
        self.base_url = base_url

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def fetch_hotels(self, criteria):
        FakeApiClient.requests.append((self.base_url, criteria))
        if FakeApiClient.error:
            raise FakeApiClient.error
        return FakeApiClient.hotels


@pytest.fixture
def fake_client(monkeypatch):
    FakeApiClient.hotels = []
    FakeApiClient.error = None
    FakeApiClient.requests = []
    monkeypatch.setattr(cli, "HotelApiClient", FakeApiClient)
    return FakeApiClient


def scripted_input(answers):
    prompts = []
    answers = list(answers)

    def read_line(prompt):
        prompts.append(prompt)
        return answers.pop(0)

    return read_line, prompts


def test_parser_browse_arguments():
    parser = cli.create_argument_parser()

    args = parser.parse_args([
        "browse", "--name", "palace", "--city", "Goa",
        "--min-price", "100", "--max-price", "150", "--batch-size", "5"
    ])

    assert args.command == "browse"
    assert args.name == "palace"
    assert args.city == "Goa"
    assert args.min_price == "100"
    assert args.max_price == "150"
    assert args.batch_size == 5
    assert args.verbose is False


def test_parser_serve_arguments():
    args = cli.create_argument_parser().parse_args(["serve", "--port", "9000"])

    assert args.command == "serve"
    assert args.port == 9000
    assert args.host is None


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        cli.create_argument_parser().parse_args([])


def test_format_hotel():
    output = cli.format_hotel(make_hotels(1)[0])

    assert "Hotel 0" in output
    assert "City: Goa" in output
    assert "Price: 1000" in output
    assert "Features: Pool" in output


def test_browse_reveals_one_batch_per_enter(fake_client, capsys):
    fake_client.hotels = make_hotels(23)
    read_line, prompts = scripted_input(["", ""])

    code = asyncio.run(cli.run_browse(FilterCriteria(), batch_size=10, read_line=read_line))

    out = capsys.readouterr().out
    assert code == 0
    assert out.count("🏨") == 23
    assert prompts == [
        "-- 10/23 shown, Enter for more, q to quit -- ",
        "-- 20/23 shown, Enter for more, q to quit -- ",
    ]


def test_browse_quits_on_q(fake_client, capsys):
    fake_client.hotels = make_hotels(30)
    read_line, prompts = scripted_input(["q"])

    code = asyncio.run(cli.run_browse(FilterCriteria(), batch_size=10, read_line=read_line))

    assert code == 0
    assert capsys.readouterr().out.count("🏨") == 10
    assert len(prompts) == 1


def test_browse_no_results(fake_client, capsys):
    code = asyncio.run(cli.run_browse(FilterCriteria(hotel_city="Atlantis")))

    assert code == 0
    assert "No hotels found" in capsys.readouterr().out


def test_browse_fetch_error(fake_client, capsys):
    fake_client.error = HotelFetchError("Failed to fetch hotel data (status 500)")

    code = asyncio.run(cli.run_browse(FilterCriteria()))

    assert code == 1
    assert "status 500" in capsys.readouterr().err


def test_main_builds_criteria_from_arguments(fake_client):
    fake_client.hotels = make_hotels(3)

    code = cli.main(["browse", "--city", "goa", "--min-price", "oops", "--max-price", "150",
                     "--api-url", "http://hotels.test"])

    assert code == 0
    base_url, criteria = fake_client.requests[0]
    assert base_url == "http://hotels.test"
    assert criteria == FilterCriteria(hotel_city="goa", max_price=150)


def test_main_rejects_non_positive_batch_size(fake_client):
    with pytest.raises(SystemExit):
        cli.main(["browse", "--batch-size", "0"])


def test_browse_announces_unfiltered_search(fake_client, capsys):
    asyncio.run(cli.run_browse(FilterCriteria()))

    assert "Searching all hotels" in capsys.readouterr().out


def test_browse_announces_active_filters(fake_client, capsys):
    asyncio.run(cli.run_browse(FilterCriteria(hotel_city="Goa", max_price=200)))

    out = capsys.readouterr().out
    assert "Searching hotels (hotelCity=Goa, maxPrice=200)" in out
    assert "Searching all hotels" not in out
