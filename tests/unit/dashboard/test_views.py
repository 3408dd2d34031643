"""Tests for dashboard projections."""

import csv
import io

from profile_ocr.dashboard.views import CSV_HEADER, compute_aggregates, filter_profiles, profiles_to_csv
from profile_ocr.models import ProfileStatus


def test_search_matches_display_name_case_insensitively(profile_factory):
    bella = profile_factory(username="@bellapoarch", display_name="Bella Poarch")
    rubi = profile_factory(username="@rubirose", display_name="Rubi Rose")

    assert filter_profiles([bella, rubi], search_term="bella") == [bella]


def test_search_matches_username(profile_factory):
    bella = profile_factory(username="@BellaPoarch", display_name="")
    rubi = profile_factory(username="@rubirose", display_name="Rubi Rose")

    assert filter_profiles([bella, rubi], search_term="@bella") == [bella]


def test_empty_search_and_all_filter_keep_everything(profile_factory):
    profiles = [profile_factory(), profile_factory(status=ProfileStatus.ERROR)]

    assert filter_profiles(profiles) == profiles


def test_status_filter(profile_factory):
    done = profile_factory(status=ProfileStatus.COMPLETED)
    busy = profile_factory(status=ProfileStatus.PROCESSING)

    assert filter_profiles([done, busy], status_filter="processing") == [busy]
    assert filter_profiles([done, busy], search_term="nobody", status_filter="all") == []


def test_filter_does_not_mutate_input(profile_factory):
    profiles = [profile_factory(display_name="A"), profile_factory(display_name="B")]
    before = list(profiles)

    filter_profiles(profiles, search_term="a")

    assert profiles == before


def test_aggregates(profile_factory):
    profiles = [
        profile_factory(revenue_estimate=100, platform="TikTok"),
        profile_factory(revenue_estimate=300, status=ProfileStatus.PROCESSING),
    ]

    aggregates = compute_aggregates(profiles)

    assert aggregates.total_revenue == 400
    assert aggregates.average_revenue == 200
    assert aggregates.completed_count == 1
    assert aggregates.profile_count == 2
    assert aggregates.platform_counts == {"TikTok": 1, "Instagram": 1}


def test_aggregates_empty():
    aggregates = compute_aggregates([])

    assert aggregates.total_revenue == 0
    assert aggregates.average_revenue == 0
    assert aggregates.completed_count == 0


def test_aggregates_treat_missing_revenue_as_zero(profile_factory):
    aggregates = compute_aggregates([profile_factory(revenue_estimate=None), profile_factory(revenue_estimate=50)])

    assert aggregates.total_revenue == 50
    assert aggregates.average_revenue == 25


def test_csv_substitutes_commas_in_bio(profile_factory):
    text = profiles_to_csv([profile_factory(bio="a,b", revenue_estimate=15640)])

    lines = text.split("\n")
    assert lines[0] == ",".join(CSV_HEADER)
    cells = lines[1].split(",")
    assert len(cells) == 9
    assert cells[4] == "a;b"
    assert cells[7] == "$15640"
    assert cells[8] == "completed"
    assert text.endswith("\n")


def test_csv_row_layout(profile_factory):
    profile = profile_factory(
        username="@rubirose",
        display_name="Rubi Rose",
        platform="Instagram",
        follower_count_text="2.1M",
        bio="Artist",
        bio_links=["https://onlyfans.com/rubirose", "https://linktr.ee/rubirose"],
        generated_page_url="https://tdstudios.app/rubirose",
        revenue_estimate=None,
    )

    row = profiles_to_csv([profile]).split("\n")[1]

    assert row == (
        "@rubirose,Rubi Rose,Instagram,2.1M,Artist,"
        "https://onlyfans.com/rubirose; https://linktr.ee/rubirose,"
        "https://tdstudios.app/rubirose,,completed"
    )


def test_csv_header_only_when_empty():
    assert profiles_to_csv([]) == ",".join(CSV_HEADER) + "\n"


def test_csv_quoted_mode_round_trips(profile_factory):
    profile = profile_factory(bio='a,b; "c"\nd', revenue_estimate=10.5)

    text = profiles_to_csv([profile], quote_fields=True)
    rows = list(csv.reader(io.StringIO(text)))

    assert rows[0] == CSV_HEADER
    assert rows[1][4] == 'a,b; "c"\nd'
    assert rows[1][7] == "$10.50"
