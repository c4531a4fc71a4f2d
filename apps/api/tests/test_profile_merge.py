"""
Unit tests for the field-by-field profile merge.
"""
from services.profile_merge import ProfileFields, merge_profile
from schemas import ProfileUpdate


class TestMergeProfile:

    def test_first_write_with_no_current_profile(self):
        merged = merge_profile(None, ProfileFields(first_name="Ann", age=30))

        assert merged.first_name == "Ann"
        assert merged.age == 30
        assert merged.weight_kg is None

    def test_empty_patch_keeps_everything(self):
        current = ProfileFields(first_name="Ann", weight_kg=60, height_cm=165)
        assert merge_profile(current, ProfileFields()) == current

    def test_incoming_value_overrides(self):
        current = ProfileFields(weight_kg=60, height_cm=165)
        merged = merge_profile(current, ProfileFields(weight_kg=62.5))

        assert merged.weight_kg == 62.5
        assert merged.height_cm == 165

    def test_none_never_clears_a_stored_value(self):
        current = ProfileFields(bio="Runner", profile_pic_url="http://img/1.png")
        merged = merge_profile(current, ProfileFields(bio=None, profile_pic_url=None))

        assert merged.bio == "Runner"
        assert merged.profile_pic_url == "http://img/1.png"

    def test_falsy_but_present_values_override(self):
        """Only null/absent preserves; 0 and '' are real values."""
        current = ProfileFields(age=30, bio="Runner")
        merged = merge_profile(current, ProfileFields(age=0, bio=""))

        assert merged.age == 0
        assert merged.bio == ""

    def test_current_is_not_mutated(self):
        current = ProfileFields(weight_kg=60)
        merge_profile(current, ProfileFields(weight_kg=70))
        assert current.weight_kg == 60

    def test_from_request_schema_ignores_email(self):
        update = ProfileUpdate(weightKg=70, email="new@example.com")
        patch = ProfileFields.from_object(update)

        assert patch.weight_kg == 70
        assert "email" not in patch.as_dict()
