from django import forms
from django.conf import settings


class ProjectForm(forms.Form):
    image = forms.FileField(required=False)
    project_name = forms.CharField(max_length=200, required=False)
    deadline = forms.DateTimeField(required=False)

    def __init__(self, *args, require_image=False, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['image'].required = require_image

    def clean_image(self):
        upload = self.cleaned_data.get('image')
        if not upload:
            return None
        limit = settings.SPLITUP_MAX_IMAGE_BYTES
        if upload.size > limit:
            raise forms.ValidationError(f"Image is larger than {limit} bytes")
        return upload.read()
