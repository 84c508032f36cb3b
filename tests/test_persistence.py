"""Tests du contexte de persistance / Persistence context tests."""

import pytest

from companies_info.models import Company, Contact, Country
from companies_info.persistence import PersistenceError


@pytest.mark.asyncio
async def test_changes_are_staged_until_save(context):
    country = Country(name="France")
    context.countries.add(country)
    assert context.has_changes
    assert country.id is None

    assert await context.save() == 1
    assert country.id is not None
    assert not context.has_changes


@pytest.mark.asyncio
async def test_save_counts_each_change(context):
    context.countries.add(Country(name="France"))
    context.countries.add(Country(name="Spain"))
    assert await context.save() == 2

    context.countries.update(1, {"name": "République française"})
    assert await context.save() == 1
    assert (await context.countries.find(1)).name == "République française"


@pytest.mark.asyncio
async def test_update_missing_row_counts_zero(context):
    context.countries.update(999, {"name": "Nowhere"})
    assert await context.save() == 0
    assert await context.countries.find(999) is None


@pytest.mark.asyncio
async def test_remove_by_reference(context):
    country = Country(name="France")
    context.countries.add(country)
    await context.save()

    context.countries.remove(country)
    assert await context.save() == 1
    assert await context.countries.find(country.id) is None


@pytest.mark.asyncio
async def test_foreign_key_violation_raises_persistence_error(context):
    context.contacts.add(Contact(name="Ghost", company_id=42, country_id=42))
    with pytest.raises(PersistenceError):
        await context.save()
    # Le contexte reste utilisable / The context stays usable
    assert not context.has_changes
    context.countries.add(Country(name="France"))
    assert await context.save() == 1


@pytest.mark.asyncio
async def test_store_cascades_company_delete(context):
    country = Country(name="France")
    context.countries.add(country)
    await context.save()
    company = Company(name="Acme", country_id=country.id)
    context.companies.add(company)
    await context.save()
    context.contacts.add(Contact(name="Alice", company_id=company.id, country_id=country.id))
    context.contacts.add(Contact(name="Bob", company_id=company.id, country_id=country.id))
    await context.save()

    context.companies.remove(company)
    await context.save()

    result = await context.execute(context.contacts.query())
    assert result.scalars().all() == []
