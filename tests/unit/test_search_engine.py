"""Unit tests for the search & ranking engine."""

from datetime import datetime, timezone

import pytest

from sanctuary_cms.application.interfaces import NullContentObserver
from sanctuary_cms.application.services.search_engine import search
from sanctuary_cms.domain.entities import (
    Category,
    EducationalResource,
    FAQ,
    SearchQuery,
    SortBy,
    SortOrder,
    Tag,
)
from sanctuary_cms.domain.field_config import (
    FAQ_ACCESSORS,
    FAQ_SUGGESTION_VOCABULARY,
    RESOURCE_ACCESSORS,
)

VISITING = Category(id="visiting", name="Visiting")
ANIMALS = Category(id="animals", name="Animals")
GUIDES = Category(id="guides", name="Guides")
VIDEOS = Category(id="videos", name="Videos")

TOURS = Tag(id="tours", name="Tours")
RESCUE = Tag(id="rescue", name="Rescue")
PRINTABLE = Tag(id="printable", name="Printable")


def _resource(rid: str, **kwargs) -> EducationalResource:
    defaults = dict(
        title=f"Resource {rid}",
        description="A resource.",
        category=GUIDES,
    )
    defaults.update(kwargs)
    return EducationalResource(id=rid, **defaults)


def _faq(fid: str, question: str, **kwargs) -> FAQ:
    defaults = dict(answer="An answer.", category=VISITING)
    defaults.update(kwargs)
    return FAQ(id=fid, question=question, **defaults)


@pytest.fixture
def faqs() -> list[FAQ]:
    return [
        _faq("hours", "What are your visiting hours?", tags=[TOURS], priority=10, views=1250,
             keywords=["schedule"]),
        _faq("cost", "How much do tours cost?", tags=[TOURS], priority=9, views=980),
        _faq("species", "Which animals live here?", category=ANIMALS, tags=[RESCUE],
             priority=10, views=1100, difficulty="intermediate"),
        _faq("stories", "Tell me a rescue story", category=ANIMALS, tags=[RESCUE],
             priority=8, views=789),
    ]


def test_resource_popularity_scenario():
    corpus = [
        _resource("a", downloads=100),
        _resource("b", downloads=50),
        _resource("c", downloads=200),
    ]
    query = SearchQuery(sort_by=SortBy.POPULARITY, sort_order=SortOrder.DESC, page=1, page_size=2)

    result = search(corpus, query, RESOURCE_ACCESSORS)

    assert [r.downloads for r in result.items] == [200, 100]
    assert result.total == 3
    assert result.total_pages == 2
    assert result.has_more is True
    assert result.current_page == 1


def test_search_does_not_mutate_corpus(faqs):
    before = [f.id for f in faqs]
    search(faqs, SearchQuery(sort_by="alphabetical"), FAQ_ACCESSORS)
    assert [f.id for f in faqs] == before


def test_text_matches_question_keywords_and_tag_names(faqs):
    assert {f.id for f in search(faqs, SearchQuery(text="HOURS"), FAQ_ACCESSORS).items} == {"hours"}
    assert {f.id for f in search(faqs, SearchQuery(text="schedule"), FAQ_ACCESSORS).items} == {"hours"}
    assert {f.id for f in search(faqs, SearchQuery(text="rescue"), FAQ_ACCESSORS).items} == {
        "species", "stories",
    }


def test_blank_text_is_not_a_filter(faqs):
    result = search(faqs, SearchQuery(text="   "), FAQ_ACCESSORS)
    assert result.total == len(faqs)
    assert result.suggestions is None


def test_no_text_match_produces_suggestions(faqs):
    result = search(
        faqs, SearchQuery(text="donat"), FAQ_ACCESSORS, vocabulary=FAQ_SUGGESTION_VOCABULARY
    )
    assert result.total == 0
    assert result.items == []
    assert result.total_pages == 0
    assert result.has_more is False
    assert result.suggestions == ["donations"]


def test_suggestions_only_when_text_stage_is_empty(faqs):
    # Text matches, filters remove everything: no suggestions
    result = search(
        faqs,
        SearchQuery(text="hours", category_id="animals"),
        FAQ_ACCESSORS,
        vocabulary=FAQ_SUGGESTION_VOCABULARY,
    )
    assert result.total == 0
    assert result.suggestions is None


def test_structured_filters_never_increase_results(faqs):
    base = search(faqs, SearchQuery(), FAQ_ACCESSORS).total
    by_category = search(faqs, SearchQuery(category_id="animals"), FAQ_ACCESSORS).total
    by_both = search(
        faqs, SearchQuery(category_id="animals", difficulty="intermediate"), FAQ_ACCESSORS
    ).total
    assert base >= by_category >= by_both
    assert (by_category, by_both) == (2, 1)


def test_tag_filter_matches_any_selected_tag(faqs):
    result = search(faqs, SearchQuery(tag_ids=["tours", "rescue"]), FAQ_ACCESSORS)
    assert result.total == 4
    result = search(faqs, SearchQuery(tag_ids=["tours"]), FAQ_ACCESSORS)
    assert {f.id for f in result.items} == {"hours", "cost"}


def test_resource_type_and_audience_filters():
    corpus = [
        _resource("a", type="pdf", target_audience=["educators"]),
        _resource("b", type="video", target_audience=["educators", "families"]),
        _resource("c", type="pdf", target_audience=["families"]),
    ]
    result = search(corpus, SearchQuery(type="pdf", audience="families"), RESOURCE_ACCESSORS)
    assert [r.id for r in result.items] == ["c"]


def test_type_filter_is_ignored_for_faqs(faqs):
    result = search(faqs, SearchQuery(type="pdf"), FAQ_ACCESSORS)
    assert result.total == len(faqs)


def test_pages_concatenate_to_full_sorted_list(faqs):
    full = search(faqs, SearchQuery(sort_by="popularity", page_size=100), FAQ_ACCESSORS).items
    collected = []
    for page in range(1, 3):
        collected.extend(
            search(faqs, SearchQuery(sort_by="popularity", page=page, page_size=3), FAQ_ACCESSORS).items
        )
    assert [f.id for f in collected] == [f.id for f in full]


def test_page_beyond_range_is_empty(faqs):
    result = search(faqs, SearchQuery(page=5, page_size=2), FAQ_ACCESSORS)
    assert result.items == []
    assert result.total == 4
    assert result.has_more is False


def test_popularity_sort_is_stable_for_ties():
    corpus = [
        _resource("first", downloads=10),
        _resource("second", downloads=10),
        _resource("top", downloads=20),
        _resource("third", downloads=10),
    ]
    result = search(corpus, SearchQuery(sort_by="popularity"), RESOURCE_ACCESSORS)
    assert [r.id for r in result.items] == ["top", "first", "second", "third"]


def test_relevance_ties_keep_input_order(faqs):
    result = search(faqs, SearchQuery(), FAQ_ACCESSORS)
    assert [f.id for f in result.items] == ["hours", "species", "cost", "stories"]


def test_resource_relevance_ranks_featured_then_rating():
    corpus = [
        _resource("plain-high", rating=4.9),
        _resource("featured-low", featured=True, rating=4.1),
        _resource("featured-high", featured=True, rating=4.8),
    ]
    result = search(corpus, SearchQuery(), RESOURCE_ACCESSORS)
    assert [r.id for r in result.items] == ["featured-high", "featured-low", "plain-high"]


def test_ascending_relevance_flips_featured_but_keeps_rating_high_first():
    corpus = [
        _resource("plain-low", rating=3.0),
        _resource("plain-high", rating=4.9),
        _resource("featured", featured=True, rating=4.0),
    ]
    result = search(corpus, SearchQuery(sort_by="relevance", sort_order="asc"), RESOURCE_ACCESSORS)
    assert [r.id for r in result.items] == ["plain-high", "plain-low", "featured"]


def test_sort_order_is_case_insensitive():
    corpus = [
        _resource("a", downloads=100),
        _resource("b", downloads=50),
    ]
    asc = search(corpus, SearchQuery(sort_by="popularity", sort_order="ASC"), RESOURCE_ACCESSORS)
    odd = search(corpus, SearchQuery(sort_by="popularity", sort_order="sideways"), RESOURCE_ACCESSORS)
    assert [r.id for r in asc.items] == ["b", "a"]
    assert [r.id for r in odd.items] == ["a", "b"]


def test_alphabetical_defaults_ascending_and_flips_with_desc(faqs):
    asc = search(faqs, SearchQuery(sort_by="title"), FAQ_ACCESSORS).items
    desc = search(faqs, SearchQuery(sort_by="alphabetical", sort_order="desc"), FAQ_ACCESSORS).items
    assert [f.id for f in asc] == ["cost", "stories", "hours", "species"]
    assert [f.id for f in desc] == ["species", "hours", "stories", "cost"]


def test_date_sort_newest_first():
    corpus = [
        _resource("old", last_updated=datetime(2024, 1, 1, tzinfo=timezone.utc)),
        _resource("new", last_updated=datetime(2024, 3, 1, tzinfo=timezone.utc)),
        _resource("mid", last_updated=datetime(2024, 2, 1, tzinfo=timezone.utc)),
    ]
    result = search(corpus, SearchQuery(sort_by="date"), RESOURCE_ACCESSORS)
    assert [r.id for r in result.items] == ["new", "mid", "old"]


def test_unknown_sort_key_falls_back_to_relevance(faqs):
    fallback = search(faqs, SearchQuery(sort_by="bogus"), FAQ_ACCESSORS)
    relevance = search(faqs, SearchQuery(), FAQ_ACCESSORS)
    assert [f.id for f in fallback.items] == [f.id for f in relevance.items]


def test_empty_corpus():
    result = search([], SearchQuery(text="anything"), RESOURCE_ACCESSORS)
    assert result.total == 0
    assert result.total_pages == 0
    assert result.has_more is False


class RecordingObserver(NullContentObserver):
    def __init__(self):
        self.searches = []

    def search_completed(self, content_type, query, total, page, duration_ms) -> None:
        self.searches.append((content_type, query, total, page))


def test_observer_receives_search_event(faqs):
    observer = RecordingObserver()
    search(faqs, SearchQuery(text=" tours ", page=1), FAQ_ACCESSORS, observer=observer)
    assert observer.searches == [(FAQ_ACCESSORS.content_type, "tours", 2, 1)]
