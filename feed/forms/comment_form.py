from django import forms

from feed.forms.fields import StringField
from feed.models import Comment
from feed.models.comment import MAX_COMMENT_LENGTH


class CommentForm(forms.ModelForm):
    """Form for creating and editing comments on posts."""

    content = StringField(
        max_length=MAX_COMMENT_LENGTH,
        widget=forms.Textarea(attrs={
            'rows': 1,
            'placeholder': 'Add a comment...',
            'class': 'form-control rounded-pill px-3',
            'style': 'resize: none; overflow: hidden; min-height: 40px;'
        }),
    )

    class Meta:
        """Model and field config for comments."""
        model = Comment
        fields = ['content']
