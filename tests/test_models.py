"""Tests for the pager and collection models."""

from zendesk_client.models import JobStatus, OrganizationMembership, Page, PagerParameters


class TestPagerParameters:

    def test_to_params(self):
        assert PagerParameters(page=2, page_size=1).to_params() == {"page": 2, "per_page": 1}

    def test_to_params_omits_unset(self):
        assert PagerParameters(page=3).to_params() == {"page": 3}
        assert PagerParameters().to_params() == {}

    def test_no_bounds_validation(self):
        pager = PagerParameters(page=-1, page_size=2**31 - 1)
        assert pager.to_params() == {"page": -1, "per_page": 2**31 - 1}


class TestPage:

    def test_sequence_behaviour(self, mock_membership_data):
        page = Page[OrganizationMembership].model_validate(
            {"items": [mock_membership_data], "count": 1}
        )

        assert len(page) == 1
        assert page[0].id == 4
        assert [m.user_id for m in page] == [29]
        assert not page.has_more

    def test_empty_page(self):
        page = Page[OrganizationMembership]()

        assert len(page) == 0
        assert list(page) == []
        assert page.count is None


class TestOrganizationMembership:

    def test_parses_server_payload(self, mock_membership_data):
        membership = OrganizationMembership.model_validate(mock_membership_data)

        assert membership.default is True
        assert membership.created_at.year == 2009

    def test_dump_omits_empty_fields(self):
        membership = OrganizationMembership(user_id=1, organization_id=2)

        assert membership.model_dump(mode="json", exclude_none=True) == {"user_id": 1, "organization_id": 2}


def test_job_status_keeps_unknown_fields():
    status = JobStatus.model_validate({"id": "abc", "total": 2, "job_type": "Bulk Create"})

    assert status.total == 2
    assert status.model_extra == {"job_type": "Bulk Create"}
