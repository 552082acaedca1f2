"""Tests for ProfileNormalizer, the top-level normalization entry point."""

import copy
import json
import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from pathlib import Path

import pytest

from cv_normalizer import normalize
from cv_normalizer.aggregation import ProfileNormalizer, merge_skill_groups, section_value
from cv_normalizer.classification import Category, SkillEncoding, SourceShape
from cv_normalizer.config.models import NormalizerConfig, SkillsConfig
from cv_normalizer.domain.models import CanonicalProfile, SkillGroup, SkillItem, SkillKind

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name):
    return json.loads((FIXTURES_DIR / name).read_text(encoding="utf-8"))


@pytest.fixture
def normalizer():
    """Normalizer with a fixed date for defaulted certificates."""
    return ProfileNormalizer(today=date(2025, 11, 3))


@pytest.fixture(params=["profile_payload.json", "parsed_payload.json", "canonical_payload.json"])
def payload(request):
    """Every sample payload."""
    return load_fixture(request.param)


class TestIdempotence:
    """normalize(normalize(x)) == normalize(x)."""

    def test_normalizing_twice_changes_nothing(self, normalizer, payload):
        """Test results of every producer shape are stable."""
        once = normalizer.normalize(payload)
        twice = normalizer.normalize(once.to_dict())

        assert twice.to_dict() == once.to_dict()

    def test_canonical_payload_is_unchanged(self, normalizer):
        """Test canonical data comes back exactly as it went in."""
        canonical = load_fixture("canonical_payload.json")

        assert normalizer.normalize(canonical).to_dict() == canonical

    def test_profile_instance_accepted(self, normalizer, payload):
        """Test a CanonicalProfile can be passed back in directly."""
        once = normalizer.normalize(payload)

        assert normalizer.normalize(once) == once

    def test_result_is_canonical(self, normalizer, payload):
        """Test every category of a result classifies as canonical."""
        once = normalizer.normalize(payload).to_dict()

        assert normalizer.normalize_with_report(once).was_canonical


class TestTotality:
    """Malformed input never raises."""

    @pytest.mark.parametrize("value", [None, {}, "a string", 42, ["list"], b"bytes"])
    def test_any_input_gives_a_profile(self, normalizer, value):
        """Test non-mapping inputs yield an empty profile."""
        profile = normalizer.normalize(value)

        assert profile == CanonicalProfile()
        assert profile.to_dict()["experience"] == []

    def test_unsupported_input_is_reported(self, normalizer, caplog):
        """Test a warning event is logged for non-mapping input."""
        with caplog.at_level(logging.WARNING):
            result = normalizer.normalize_with_report("a string")

        assert result.input_accepted is False
        assert any(
            getattr(r, "event", None) == "normalization.input.unsupported" for r in caplog.records
        )

    def test_none_is_accepted_silently(self, normalizer):
        """Test None counts as an empty but valid payload."""
        assert normalizer.normalize_with_report(None).input_accepted is True

    def test_wrong_typed_sections(self, normalizer):
        """Test wrong-typed sections become empty lists."""
        profile = normalizer.normalize({
            "education": "MIT",
            "experience": {"position": "Dev"},
            "skills": 12,
            "languages": [1, 2],
            "certifications": 3.5,
            "awards": [None],
            "projects": "none",
            "personalInfo": "Ada",
        })

        data = profile.to_dict()
        for key in ("education", "experience", "skills", "languages", "certifications", "awards", "projects"):
            assert data[key] == []
        assert data["personalInfo"]["fullName"] == ""

    def test_every_list_field_present(self, normalizer):
        """Test the empty profile still carries every list field."""
        data = normalizer.normalize({}).to_dict()

        for key in ("experience", "education", "skills", "languages", "certifications", "awards", "projects"):
            assert data[key] == []
        assert "softSkills" not in data

    def test_input_not_mutated(self, normalizer, payload):
        """Test the caller's payload is left untouched."""
        original = copy.deepcopy(payload)
        normalizer.normalize(payload)

        assert payload == original


class TestKeyAliasing:
    """certificates/certifications and highlightProjects."""

    def test_certificates_equals_certifications(self, normalizer):
        """Test either key gives the same result."""
        certs = [{"name": "CKA", "org": "CNCF", "month": "1", "year": "2023"}, "AWS SAA"]

        via_certificates = normalizer.normalize({"certificates": certs})
        via_certifications = normalizer.normalize({"certifications": certs})

        assert via_certificates == via_certifications
        assert len(via_certificates.certifications) == 2

    def test_certifications_preferred(self, normalizer):
        """Test certifications wins when both keys have entries."""
        profile = normalizer.normalize({"certifications": ["A"], "certificates": ["B"]})

        assert [c.name for c in profile.certifications] == ["A"]

    def test_empty_certifications_falls_back(self, normalizer):
        """Test an empty certifications list does not hide certificates."""
        profile = normalizer.normalize({"certifications": [], "certificates": ["B"]})

        assert [c.name for c in profile.certifications] == ["B"]

    def test_parser_certificates_are_dated_and_stable(self, normalizer):
        """Test {name, issuer, date} certificates get parsed dates and re-normalize unchanged."""
        once = normalizer.normalize({
            "certificates": [
                {"name": "AWS SAA", "issuer": "Amazon", "date": "March 2021"},
                {"name": "CKA", "issuer": "CNCF"},
            ]
        })

        assert [(c.date, c.date_defaulted) for c in once.certifications] == [
            ("2021-03-01", False),
            ("2025-11-03", True),
        ]
        assert normalizer.normalize(once.to_dict()) == once

    def test_highlight_projects(self, normalizer):
        """Test highlightProjects is used when projects is empty."""
        profile = normalizer.normalize({"projects": [], "highlightProjects": [{"name": "X", "startYear": "2020"}]})

        assert [p.name for p in profile.projects] == ["X"]

    def test_section_value(self):
        """Test alias lookup helper."""
        assert section_value({"certificates": ["A"]}, Category.CERTIFICATIONS) == ["A"]
        assert section_value({}, Category.CERTIFICATIONS) is None


class TestSkills:
    """Skill merging and the single soft-skill rendering path."""

    def test_encodings_are_equivalent(self, normalizer):
        """Test categorized object and named objects normalize identically."""
        categorized = normalizer.normalize({"skills": {"technical_skills": ["Go"], "soft_skills": ["Teamwork"]}})
        named = normalizer.normalize({"skills": [{"name": "Go"}, {"name": "Teamwork", "category": "soft"}]})

        assert categorized == named

    def test_soft_skills_rendered_once(self, normalizer):
        """Test softSkills is omitted when a soft group exists."""
        profile = normalizer.normalize({
            "skills": {"technical_skills": ["Go"], "soft_skills": ["Teamwork"]},
            "softSkills": ["Teamwork"],
        })

        soft_groups = [g for g in profile.skills if g.kind is SkillKind.SOFT]
        assert len(soft_groups) == 1
        assert profile.soft_skills is None
        assert "softSkills" not in profile.to_dict()

    def test_flat_soft_skills_without_group(self, normalizer):
        """Test softSkills is kept when nothing else renders soft skills."""
        profile = normalizer.normalize({"skills": ["Go"], "softSkills": ["Mentoring", " "]})

        assert profile.soft_skills == ["Mentoring"]

    def test_software_group_keeps_flat_soft_skills(self, normalizer):
        """Test a "Software Development" group is technical and softSkills survives."""
        profile = normalizer.normalize({
            "skills": [{"name": "Software Development", "items": [{"skill": "Python", "experience": "5"}]}],
            "softSkills": ["Teamwork"],
        })

        assert profile.skills[0].kind is SkillKind.TECHNICAL
        assert profile.skills[0].items[0].years_of_experience == 5
        assert profile.soft_skills == ["Teamwork"]

    def test_soft_detection_is_structural(self):
        """Test a custom soft label still suppresses the flat list."""
        config = NormalizerConfig(skills=SkillsConfig(soft_category_label="People Skills"))
        profile = ProfileNormalizer(config=config).normalize({
            "skills": {"soft_skills": ["Teamwork"]},
            "softSkills": ["Teamwork"],
        })

        assert profile.skills[0].category == "People Skills"
        assert profile.skills[0].kind is SkillKind.SOFT
        assert profile.soft_skills is None

    def test_profile_groups_merged_with_skills(self, normalizer):
        """Test coreSkillGroups and softSkillGroups join the skills section."""
        profile = normalizer.normalize(load_fixture("profile_payload.json"))

        assert [(g.category, g.kind) for g in profile.skills] == [
            ("Frontend", SkillKind.TECHNICAL),
            ("Tooling", SkillKind.TECHNICAL),
            ("Soft Skills", SkillKind.SOFT),
        ]
        assert [i.skill for i in profile.skills[2].items] == ["Mentoring", "Presenting"]

    def test_colliding_groups_merge(self, normalizer):
        """Test same-category groups from different sources are merged."""
        profile = normalizer.normalize({
            "skills": [{"name": "Soft Skills", "items": [{"skill": "Listening"}]}],
            "softSkillGroups": [{"name": "Any", "items": [{"skill": "listening"}, {"skill": "Coaching"}]}],
        })

        soft = [g for g in profile.skills if g.kind is SkillKind.SOFT]
        assert len(soft) == 1
        assert [(i.id, i.skill) for i in soft[0].items] == [("1", "Listening"), ("2", "Coaching")]

    def test_merge_skill_groups(self):
        """Test merge keys are kind plus case-insensitive category."""
        groups = [
            SkillGroup(category="Backend", items=[SkillItem(id="1", skill="Go")]),
            SkillGroup(category="backend", items=[SkillItem(id="1", skill="Rust"), SkillItem(id="2", skill="go")]),
            SkillGroup(category="Backend", kind=SkillKind.SOFT, items=[]),
        ]

        merged = merge_skill_groups(groups)

        assert len(merged) == 2
        assert merged[0].category == "Backend"
        assert [(i.id, i.skill) for i in merged[0].items] == [("1", "Go"), ("2", "Rust")]
        # Inputs are not modified
        assert [i.skill for i in groups[0].items] == ["Go"]


class TestParsedPayload:
    """End-to-end checks on the parsed-document sample."""

    def test_sections(self, normalizer):
        """Test the main conversions of a parsed document."""
        profile = normalizer.normalize(load_fixture("parsed_payload.json"))

        assert profile.personal_info.full_name == "Minh Pham"
        assert profile.personal_info.position == "Data Engineer"
        assert profile.education[0].period == "2016 - 2018"
        assert profile.experience[0].period == "03/2020 - Present"
        assert profile.experience[1].company == "Unknown Company"
        assert [lang.level.value for lang in profile.languages] == ["Native", "Beginner"]
        assert profile.certifications[0].date == "2025-11-03"
        assert profile.certifications[0].date_defaulted is True
        assert profile.certifications[1].description == "Credential ID: ABC-123"
        assert profile.projects[0].technologies == ["Kafka", "Spark"]

    def test_report(self, normalizer):
        """Test the report lists shapes and defaulted dates."""
        result = normalizer.normalize_with_report(load_fixture("parsed_payload.json"))

        assert result.shapes[Category.EXPERIENCE] is SourceShape.PARSED_SHAPE
        assert result.shapes[Category.SKILLS] is SourceShape.PARSED_SHAPE
        assert result.skill_encoding is SkillEncoding.CATEGORIZED_OBJECT
        assert result.defaulted_dates == 1
        assert result.was_canonical is False
        assert len(result.normalization_id) == 12


class TestConfiguration:
    """Configuration flows into the normalizers."""

    def test_fallbacks_and_defaults_from_config(self):
        """Test fallbacks and default years come from NormalizerConfig."""
        config = NormalizerConfig.model_validate({
            "fallbacks": {"company": "Confidential"},
            "skills": {"technical_default_years": 3},
        })
        profile = ProfileNormalizer(config=config).normalize({
            "experience": [{"jobTitle": "Dev"}],
            "skills": ["Go"],
        })

        assert profile.experience[0].company == "Confidential"
        assert profile.skills[0].items[0].years_of_experience == 3


class TestConcurrency:
    """Per-category processing is independent."""

    def test_parallel_equals_sequential(self, normalizer, payload):
        """Test categories run in threads give the sequential result."""
        sequential = normalizer.normalize(payload)

        with ThreadPoolExecutor(max_workers=4) as executor:
            futures = {
                category: executor.submit(normalizer.normalize_category, category, payload)
                for category in Category
            }
            parallel = {category: future.result() for category, future in futures.items()}

        for category in Category:
            assert parallel[category] == getattr(sequential, category.value)

    def test_concurrent_normalize_calls(self, normalizer, payload):
        """Test whole normalize calls may share one normalizer."""
        expected = normalizer.normalize(payload)

        with ThreadPoolExecutor(max_workers=4) as executor:
            results = list(executor.map(normalizer.normalize, [payload] * 8))

        assert all(result == expected for result in results)

    def test_normalize_category_rejects_non_mapping(self, normalizer):
        """Test non-mapping payloads give an empty section."""
        assert normalizer.normalize_category(Category.EDUCATION, "x") == []


def test_module_level_normalize():
    """Test the package-level convenience function."""
    profile = normalize({"experience": [{"jobTitle": "Dev", "company": "ACME"}]})

    assert profile.experience[0].position == "Dev"
