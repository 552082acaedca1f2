"""Tests for per-category schema classification."""

import pytest

from cv_normalizer.classification import (
    Category,
    SkillEncoding,
    SourceShape,
    classify,
    classify_profile,
    classify_skills,
    is_canonical_profile,
)


class TestClassifyEntries:
    """Tests for list-valued categories."""

    @pytest.mark.parametrize(
        "category,entry,expected",
        [
            (Category.EDUCATION, {"school": "MIT", "period": "2019 - 2021"}, SourceShape.CANONICAL),
            (Category.EDUCATION, {"school": "MIT", "startMonth": "9"}, SourceShape.PROFILE_SHAPE),
            (Category.EDUCATION, {"institution": "MIT"}, SourceShape.PARSED_SHAPE),
            (Category.EDUCATION, {"degree": "BSc", "start_date": "2019"}, SourceShape.PARSED_SHAPE),
            (Category.EXPERIENCE, {"position": "Dev", "period": ""}, SourceShape.CANONICAL),
            (Category.EXPERIENCE, {"jobTitle": "Dev"}, SourceShape.PROFILE_SHAPE),
            (Category.EXPERIENCE, {"title": "Dev", "duration": "2 years"}, SourceShape.PARSED_SHAPE),
            (Category.PROJECTS, {"name": "X", "technologies": ["Go"]}, SourceShape.CANONICAL),
            (
                Category.PROJECTS,
                {"name": "X", "technologies": ["Go"], "startYear": "2020"},
                SourceShape.PROFILE_SHAPE,
            ),
            (Category.PROJECTS, {"name": "X", "tech_stack": ["Go"]}, SourceShape.PARSED_SHAPE),
            (Category.LANGUAGES, {"language": "English", "level": "Native"}, SourceShape.CANONICAL),
            (Category.LANGUAGES, {"name": "English", "proficiency": "C1"}, SourceShape.PARSED_SHAPE),
            (Category.CERTIFICATIONS, "AWS SAA", SourceShape.PARSED_SHAPE),
            (Category.CERTIFICATIONS, {"name": "CKA", "org": "CNCF"}, SourceShape.PROFILE_SHAPE),
            (Category.CERTIFICATIONS, {"name": "CKA", "credential_id": "1"}, SourceShape.PARSED_SHAPE),
            (Category.CERTIFICATIONS, {"name": "CKA", "dateDefaulted": True}, SourceShape.CANONICAL),
            (
                Category.CERTIFICATIONS,
                {"name": "CKA", "issuer": "CNCF", "date": "2022-04-01"},
                SourceShape.CANONICAL,
            ),
            (Category.CERTIFICATIONS, {"name": "CKA", "issuer": "CNCF", "date": "04/2022"}, SourceShape.CANONICAL),
            (
                Category.CERTIFICATIONS,
                {"name": "CKA", "issuer": "CNCF", "date": "March 2021"},
                SourceShape.PARSED_SHAPE,
            ),
            (Category.CERTIFICATIONS, {"name": "CKA", "issuer": "CNCF"}, SourceShape.PARSED_SHAPE),
            (Category.AWARDS, "Best Paper", SourceShape.CANONICAL),
            (Category.AWARDS, {"name": "Best Paper"}, SourceShape.PROFILE_SHAPE),
        ],
    )
    def test_first_entry_decides(self, category, entry, expected):
        """Test the discriminating keys of each producer."""
        assert classify(category, [entry]) is expected

    def test_entry_without_discriminator_is_canonical(self):
        """Test data with no tell-tale keys fails open to canonical."""
        assert classify(Category.EDUCATION, [{"degree": "BSc"}]) is SourceShape.CANONICAL

    @pytest.mark.parametrize("value", [None, []])
    def test_nothing_to_convert_is_canonical(self, value):
        """Test None and empty lists are canonical."""
        assert classify(Category.EXPERIENCE, value) is SourceShape.CANONICAL

    @pytest.mark.parametrize("value", ["oops", 42, {"position": "Dev"}])
    def test_non_list_is_unknown(self, value):
        """Test wrong-typed sections are unknown."""
        assert classify(Category.EXPERIENCE, value) is SourceShape.UNKNOWN

    def test_non_mapping_entries_are_unknown(self):
        """Test lists of scalars are unknown for object sections."""
        assert classify(Category.EDUCATION, ["MIT"]) is SourceShape.UNKNOWN
        assert classify(Category.AWARDS, [42]) is SourceShape.UNKNOWN

    def test_category_given_as_string(self):
        """Test categories may be passed by value."""
        assert classify("awards", ["x"]) is SourceShape.CANONICAL


class TestClassifySkills:
    """Tests for the skills encoding tag."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, SkillEncoding.EMPTY),
            ([], SkillEncoding.EMPTY),
            ({}, SkillEncoding.EMPTY),
            ({"technical_skills": ["Go"], "soft_skills": []}, SkillEncoding.CATEGORIZED_OBJECT),
            ({"soft_skills": ["Teamwork"]}, SkillEncoding.CATEGORIZED_OBJECT),
            (["Go", "SQL"], SkillEncoding.STRING_LIST),
            ([{"category": "Backend", "items": []}], SkillEncoding.CANONICAL_GROUPS),
            ([{"name": "Backend", "items": []}], SkillEncoding.PROFILE_GROUPS),
            ([{"name": "Go", "category": "Backend"}], SkillEncoding.NAMED_OBJECTS),
            ([{"name": "Go"}], SkillEncoding.NAMED_OBJECTS),
            ({"languages": ["Go"]}, SkillEncoding.UNKNOWN),
            ("Go, SQL", SkillEncoding.UNKNOWN),
            ([42], SkillEncoding.UNKNOWN),
        ],
    )
    def test_encodings(self, value, expected):
        """Test every known encoding and the unknown fallbacks."""
        assert classify_skills(value) is expected

    def test_skills_shape_follows_encoding(self):
        """Test classify() maps encodings to shapes."""
        assert classify(Category.SKILLS, ["Go"]) is SourceShape.PARSED_SHAPE
        assert classify(Category.SKILLS, [{"name": "B", "items": []}]) is SourceShape.PROFILE_SHAPE
        assert classify(Category.SKILLS, None) is SourceShape.CANONICAL
        assert classify(Category.SKILLS, 7) is SourceShape.UNKNOWN


class TestClassifyProfile:
    """Tests for whole-payload classification."""

    def test_mixed_payload(self):
        """Test each category is classified independently."""
        payload = {
            "experience": [{"position": "Dev", "period": "2020 - 2021"}],
            "skills": {"technical_skills": ["Go"]},
            "personalInfo": {"fullName": "Ada"},
        }

        assert classify_profile(payload) == {
            Category.EXPERIENCE: SourceShape.CANONICAL,
            Category.SKILLS: SourceShape.PARSED_SHAPE,
        }

    def test_is_canonical_profile(self):
        """Test canonical detection, including profile-editor skill groups."""
        canonical = {"education": [{"degree": "BSc", "school": "MIT", "period": ""}]}

        assert is_canonical_profile(canonical) is True
        assert is_canonical_profile({**canonical, "softSkillGroups": []}) is False
        assert is_canonical_profile({"experience": [{"jobTitle": "Dev"}]}) is False
        assert is_canonical_profile("not a mapping") is False
