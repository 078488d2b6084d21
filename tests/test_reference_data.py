"""Tests for reference data lookups."""

from maquitrack.domain.reference_data import ReferenceData


def test_find_equipment_by_code_and_plate(temp_db, sample_equipment):
    reference = ReferenceData.load(temp_db)

    assert reference.find_equipment(" exc-001 ").id == sample_equipment.id
    assert reference.find_equipment("ABC-123") is None
    assert reference.find_equipment("abc-123", by_plate=True).id == sample_equipment.id
    assert reference.find_equipment(None, by_plate=True) is None


def test_company_fragments(temp_db, sample_companies):
    reference = ReferenceData.load(temp_db)

    assert reference.resolve_company("Maq. JLMX") == (sample_companies["jlmx"], False)
    assert reference.resolve_company("jomex sac") == (sample_companies["jomex"], False)
    assert reference.resolve_company("CUSMA") == (sample_companies["jorge"], False)
    assert reference.resolve_company("Jorge") == (sample_companies["jorge"], False)


def test_company_direct_name_match(temp_db, company_service):
    company_id = company_service.create_company("ANDES RENTAL")
    reference = ReferenceData.load(temp_db)

    assert reference.resolve_company("andes rental") == (company_id, False)


def test_unknown_company_falls_back_to_first(temp_db, sample_companies):
    reference = ReferenceData.load(temp_db)

    assert reference.default_company.id == sample_companies["jlmx"]
    assert reference.resolve_company("OTRA EMPRESA") == (sample_companies["jlmx"], True)


def test_no_companies_registered(temp_db):
    reference = ReferenceData.load(temp_db)

    assert reference.default_company is None
    assert reference.resolve_company("JLMX") == (None, True)
