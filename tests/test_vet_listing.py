"""
Tests for in-memory vet filtering and the vet list page model.
"""

import pytest

from petclinic.models import Specialty, Vet
from petclinic.search.vet_listing import (
    VET_PAGE_SIZE,
    build_vet_listing,
    filter_vets_by_specialty,
    specialty_names,
)


def make_vet(vet_id, first_name, last_name, *specialties):
    vet = Vet(id=vet_id, first_name=first_name, last_name=last_name)
    for specialty in specialties:
        vet.add_specialty(specialty)
    return vet


@pytest.fixture
def specialties():
    return {
        "radiology": Specialty(id=1, name="radiology"),
        "surgery": Specialty(id=2, name="surgery"),
        "dentistry": Specialty(id=3, name="dentistry"),
    }


@pytest.fixture
def vets(specialties):
    """Three vets: radiology, surgery, and one without specialties."""
    return [
        make_vet(1, "Helen", "Leary", specialties["radiology"]),
        make_vet(2, "Rafael", "Ortega", specialties["surgery"]),
        make_vet(3, "James", "Carter"),
    ]


@pytest.fixture
def many_vets(specialties):
    """Twelve vets, every third one a surgeon."""
    return [
        make_vet(
            index,
            f"First{index}",
            f"Last{index}",
            *([specialties["surgery"]] if index % 3 == 0 else []),
        )
        for index in range(1, 13)
    ]


class TestFilterVetsBySpecialty:
    """Test cases for filter_vets_by_specialty."""

    @pytest.mark.parametrize("selector", [None, ""])
    def test_blank_selector_keeps_all(self, vets, selector):
        """Test no selector returns every vet in order."""
        assert filter_vets_by_specialty(vets, selector) == vets

    def test_specialty_name(self, vets):
        """Test a specialty name keeps only vets holding it."""
        result = filter_vets_by_specialty(vets, "surgery")

        assert [vet.last_name for vet in result] == ["Ortega"]

    def test_specialty_name_ignores_case(self, vets):
        """Test specialty names match case-insensitively."""
        result = filter_vets_by_specialty(vets, "RadioLogy")

        assert [vet.last_name for vet in result] == ["Leary"]

    @pytest.mark.parametrize("selector", ["none", "NONE", "None"])
    def test_none_keeps_vets_without_specialties(self, vets, selector):
        """Test the none selector keeps only vets with no specialty."""
        result = filter_vets_by_specialty(vets, selector)

        assert [vet.last_name for vet in result] == ["Carter"]

    def test_unknown_specialty(self, vets):
        """Test an unknown specialty matches nobody."""
        assert filter_vets_by_specialty(vets, "cardiology") == []

    def test_partial_name_does_not_match(self, vets):
        """Test specialty names are compared whole."""
        assert filter_vets_by_specialty(vets, "surg") == []


class TestSpecialtyNames:
    """Test cases for specialty_names."""

    def test_distinct_and_sorted(self, specialties):
        """Test names are de-duplicated and sorted."""
        vets = [
            make_vet(1, "Linda", "Douglas", specialties["surgery"], specialties["dentistry"]),
            make_vet(2, "Rafael", "Ortega", specialties["surgery"]),
            make_vet(3, "James", "Carter"),
        ]

        assert specialty_names(vets) == ["dentistry", "surgery"]

    def test_no_vets(self):
        """Test no vets gives no names."""
        assert specialty_names([]) == []


class TestBuildVetListing:
    """Test cases for build_vet_listing."""

    def test_context_attributes(self, vets):
        """Test the template context carries every attribute."""
        context = build_vet_listing(vets, page=1).to_context()

        assert context["specialties"] == ["radiology", "surgery"]
        assert context["selectedSpecialty"] is None
        assert context["lastName"] == ""
        assert context["currentPage"] == 1
        assert context["totalPages"] == 1
        assert context["totalItems"] == 3
        assert context["listVets"] == vets

    def test_selected_specialty_is_kept(self, vets):
        """Test the selected specialty and last name are echoed."""
        context = build_vet_listing(
            vets, page=1, specialty="surgery", last_name="O"
        ).to_context()

        assert context["selectedSpecialty"] == "surgery"
        assert context["lastName"] == "O"
        assert context["totalItems"] == 1
        # Choices come from the unfiltered vets
        assert context["specialties"] == ["radiology", "surgery"]

    def test_page_size(self, many_vets):
        """Test pages hold at most five vets."""
        listing = build_vet_listing(many_vets, page=1)

        assert VET_PAGE_SIZE == 5
        assert len(listing.page.content) == 5
        assert listing.page.total_pages == 3
        assert listing.page.total_elements == 12

    def test_totals_follow_filter(self, many_vets):
        """Test totals count the filtered vets."""
        listing = build_vet_listing(many_vets, page=1, specialty="surgery")

        assert listing.page.total_elements == 4
        assert listing.page.total_pages == 1
        assert [vet.id for vet in listing.page.content] == [3, 6, 9, 12]

    def test_page_beyond_last(self, many_vets):
        """Test a page past the end is empty with unchanged totals."""
        listing = build_vet_listing(many_vets, page=4)

        assert listing.page.content == []
        assert listing.page.total_pages == 3
        assert listing.page.total_elements == 12

    def test_page_below_one(self, many_vets):
        """Test page 0 shows the first page."""
        listing = build_vet_listing(many_vets, page=0)

        assert listing.page.number == 1
        assert [vet.id for vet in listing.page.content] == [1, 2, 3, 4, 5]
