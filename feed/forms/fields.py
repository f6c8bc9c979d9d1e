from django import forms


class StringOnlyMixin:
    """Reject submitted values that are not text (lists, objects, numbers from JSON bodies)."""

    default_error_messages = {
        "not_a_string": "This field must be a string.",
    }

    def to_python(self, value):
        """Refuse non-string input instead of coercing it with str()."""
        if value not in self.empty_values and not isinstance(value, str):
            raise forms.ValidationError(self.error_messages["not_a_string"], code="not_a_string")
        return super().to_python(value)


class StringField(StringOnlyMixin, forms.CharField):
    """CharField that only accepts string input."""


class StringEmailField(StringOnlyMixin, forms.EmailField):
    """EmailField that only accepts string input."""
