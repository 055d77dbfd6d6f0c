"""Unit tests for the SQLModel repositories against in-memory SQLite."""

from datetime import timedelta

import pytest

from formforge.core.database.base import _utc_now_naive
from formforge.core.database.entities import (
    EmailVerification,
    Form,
    FormElement,
    Organization,
    RefreshToken,
    Submission,
    User,
)
from formforge.core.database.repositories.base import QueryBuilder
from formforge.core.database.repositories.users import normalize_email
from formforge.core.models.domain.enums import ElementType, SubmissionStatus, UserRole


@pytest.fixture
async def user(repos, organization) -> User:
    return await repos.users.create(
        User(
            email="owner@acme.example",
            first_name="Olive",
            last_name="Owner",
            password_hash="$2b$04$hash",
            role=UserRole.ORG_ADMIN,
            organization_id=organization.id,
        )
    )


@pytest.fixture
async def form(repos, organization, user) -> Form:
    return await repos.forms.create(Form(name="Contact us", organization_id=organization.id, created_by=user.id))


class TestBaseRepository:
    async def test_create_populates_defaults(self, repos, organization):
        assert len(organization.id) == 36
        assert organization.created_at is not None
        assert organization.parsed_settings.max_forms_per_user == 50

    async def test_get_by_id_missing(self, repos):
        assert await repos.organizations.get_by_id("missing") is None

    async def test_update_and_delete(self, repos, organization):
        organization.name = "Acme Inc"
        updated = await repos.organizations.update(organization)
        assert (await repos.organizations.get_by_id(updated.id)).name == "Acme Inc"

        assert await repos.organizations.delete(organization.id) is True
        assert await repos.organizations.delete(organization.id) is False
        assert await repos.organizations.get_by_id(organization.id) is None

    async def test_list_orders_filters_and_paginates(self, repos):
        for name in ("Charlie", "Alpha", "Bravo"):
            await repos.organizations.create(Organization(name=name))

        names = [org.name for org in await repos.organizations.list()]
        assert names == ["Alpha", "Bravo", "Charlie"]

        page = await repos.organizations.list(limit=1, offset=1)
        assert [org.name for org in page] == ["Bravo"]

        filtered = await repos.organizations.list(filters={"name": "Charlie", "unknown_field": "x", "domain": None})
        assert [org.name for org in filtered] == ["Charlie"]

    def test_query_builder_ignores_none_values(self):
        stmt = object()
        assert QueryBuilder.apply_pagination(stmt, None, None) is stmt
        assert QueryBuilder.apply_filters(stmt, Organization, {"name": None}) is stmt


class TestUserRepository:
    def test_normalize_email(self):
        assert normalize_email("  Jane.Doe@Example.COM ") == "jane.doe@example.com"

    async def test_get_by_email_ignores_case(self, repos, user):
        found = await repos.users.get_by_email("OWNER@ACME.example")
        assert found is not None
        assert found.id == user.id

    async def test_default_role_is_viewer(self, repos):
        created = await repos.users.create(
            User(email="new@example.com", first_name="N", last_name="U", password_hash="x")
        )
        assert created.role == UserRole.VIEWER
        assert created.is_email_verified is False

    async def test_mark_email_verified(self, repos, user):
        updated = await repos.users.mark_email_verified("owner@acme.example")
        assert updated.is_email_verified is True
        assert await repos.users.mark_email_verified("missing@example.com") is None

    async def test_update_password(self, repos, user):
        updated = await repos.users.update_password(user.id, "$2b$04$other")
        assert updated.password_hash == "$2b$04$other"
        assert await repos.users.update_password("missing", "x") is None


class TestRefreshTokenRepository:
    async def test_rotate_replaces_token_in_place(self, repos, user):
        expires = _utc_now_naive() + timedelta(days=7)
        stored = await repos.refresh_tokens.create(RefreshToken(token="first", user_id=user.id, expires_at=expires))

        rotated = await repos.refresh_tokens.rotate(stored, "second", expires + timedelta(days=1))

        assert rotated.id == stored.id
        assert await repos.refresh_tokens.get_by_token("first") is None
        assert (await repos.refresh_tokens.get_by_token("second")).expires_at == expires + timedelta(days=1)

    async def test_delete_by_token_and_user(self, repos, user):
        expires = _utc_now_naive() + timedelta(days=7)
        for token in ("a", "b", "c"):
            await repos.refresh_tokens.create(RefreshToken(token=token, user_id=user.id, expires_at=expires))

        assert await repos.refresh_tokens.delete_by_token("a") == 1
        assert await repos.refresh_tokens.delete_by_token("a") == 0
        assert await repos.refresh_tokens.delete_by_user(user.id) == 2
        assert await repos.refresh_tokens.list_by_user(user.id) == []

    async def test_purge_expired(self, repos, user):
        now = _utc_now_naive()
        await repos.refresh_tokens.create(RefreshToken(token="old", user_id=user.id, expires_at=now - timedelta(1)))
        await repos.refresh_tokens.create(RefreshToken(token="new", user_id=user.id, expires_at=now + timedelta(1)))

        assert await repos.refresh_tokens.purge_expired(now) == 1
        assert [t.token for t in await repos.refresh_tokens.list_by_user(user.id)] == ["new"]

    def test_is_expired(self):
        now = _utc_now_naive()
        assert RefreshToken(token="t", user_id="u", expires_at=now - timedelta(seconds=1)).is_expired(now)
        assert not RefreshToken(token="t", user_id="u", expires_at=now + timedelta(seconds=1)).is_expired(now)


class TestEmailVerificationRepository:
    async def test_replace_code_keeps_only_latest(self, repos):
        expires = _utc_now_naive() + timedelta(minutes=15)
        await repos.email_verifications.replace_code("a@example.com", "111111", expires)
        await repos.email_verifications.replace_code("a@example.com", "222222", expires)

        rows = await repos.email_verifications.list(filters={"email": "a@example.com"})
        assert [row.code for row in rows] == ["222222"]

    async def test_replace_code_with_same_code(self, repos):
        expires = _utc_now_naive() + timedelta(minutes=15)
        await repos.email_verifications.replace_code("a@example.com", "111111", expires)
        await repos.email_verifications.replace_code("a@example.com", "111111", expires)

        assert len(await repos.email_verifications.list(filters={"email": "a@example.com"})) == 1

    async def test_find_valid_respects_expiry(self, repos):
        now = _utc_now_naive()
        await repos.email_verifications.create(
            EmailVerification(email="a@example.com", code="111111", expires_at=now + timedelta(minutes=1))
        )
        await repos.email_verifications.create(
            EmailVerification(email="b@example.com", code="222222", expires_at=now - timedelta(minutes=1))
        )

        assert await repos.email_verifications.find_valid("a@example.com", "111111", now) is not None
        assert await repos.email_verifications.find_valid("a@example.com", "222222", now) is None
        assert await repos.email_verifications.find_valid("b@example.com", "222222", now) is None
        assert await repos.email_verifications.purge_expired(now) == 1
        assert await repos.email_verifications.delete_by_email("a@example.com") == 1


class TestOrganizationRepository:
    async def test_get_by_domain_ignores_case(self, repos, organization):
        assert (await repos.organizations.get_by_domain("ACME.example")).id == organization.id
        assert await repos.organizations.get_by_domain("other.example") is None

    async def test_domain_is_normalized_on_write(self, repos):
        created = await repos.organizations.create(Organization(name="Mixed", domain="  Mixed.Example "))

        assert created.domain == "mixed.example"
        assert (await repos.organizations.get_by_domain("MIXED.example")).id == created.id

        created.domain = "Renamed.Example"
        await repos.organizations.update(created)
        assert (await repos.organizations.get_by_domain("renamed.example")).id == created.id
        assert await repos.organizations.get_by_domain("mixed.example") is None

    async def test_organization_without_domain(self, repos):
        created = await repos.organizations.create(Organization(name="No domain"))
        assert created.domain is None


class TestFormRepositories:
    async def test_publish_and_unpublish(self, repos, form):
        assert form.is_published is False
        assert form.parsed_settings.allow_duplicate_submissions is True

        published = await repos.forms.publish(form.id)
        assert published.is_published is True
        assert published.published_at is not None
        first_published_at = published.published_at

        again = await repos.forms.publish(form.id)
        assert again.published_at == first_published_at

        unpublished = await repos.forms.unpublish(form.id)
        assert unpublished.is_published is False
        assert unpublished.published_at is None

        assert await repos.forms.publish("missing") is None
        assert await repos.forms.unpublish("missing") is None

    async def test_list_by_organization(self, repos, organization, user, form):
        draft = await repos.forms.create(Form(name="Draft", organization_id=organization.id, created_by=user.id))
        await repos.forms.publish(form.id)

        all_forms = await repos.forms.list_by_organization(organization.id)
        published = await repos.forms.list_by_organization(organization.id, published_only=True)

        assert {f.id for f in all_forms} == {form.id, draft.id}
        assert [f.id for f in published] == [form.id]
        assert await repos.forms.list_by_organization("other-org") == []

    async def test_replace_elements(self, repos, form):
        await repos.form_elements.replace_elements(
            form.id,
            [FormElement(form_id="ignored", type=ElementType.TEXT_INPUT, properties={"label": "Name"})],
        )
        replaced = await repos.form_elements.replace_elements(
            form.id,
            [
                FormElement(form_id="", type=ElementType.EMAIL_INPUT, position={"x": 0, "y": 0}),
                FormElement(form_id="", type=ElementType.SIGNATURE, position={"x": 0, "y": 80}),
            ],
        )

        elements = await repos.form_elements.list_by_form(form.id)
        assert {e.id for e in elements} == {e.id for e in replaced}
        assert {e.type for e in elements} == {ElementType.EMAIL_INPUT, ElementType.SIGNATURE}
        assert all(e.form_id == form.id for e in elements)


class TestSubmissionRepository:
    async def test_list_count_and_status(self, repos, form):
        first = await repos.submissions.create(
            Submission(form_id=form.id, data={"email": "a@example.com"}, ip_address="10.0.0.1")
        )
        await repos.submissions.create(Submission(form_id=form.id, data={}, ip_address="10.0.0.2"))

        assert first.status == SubmissionStatus.PENDING
        assert await repos.submissions.count_by_form(form.id) == 2

        await repos.submissions.update_status(first.id, SubmissionStatus.SPAM)
        spam = await repos.submissions.list_by_form(form.id, status=SubmissionStatus.SPAM)
        assert [s.id for s in spam] == [first.id]
        assert len(await repos.submissions.list_by_form(form.id)) == 2
        assert await repos.submissions.update_status("missing", SubmissionStatus.PROCESSED) is None
