"""
Request encoders - JSON bodies and multipart forms.
"""

from openai_lite.encoding.body import JSON_CONTENT_TYPE, EncodedBody, FormPart
from openai_lite.encoding.json_body import encode_json_body, omit_empty
from openai_lite.encoding.multipart import (
    audio_form_fields,
    encode_audio_form,
    file_part,
    new_boundary,
    text_part,
)

__all__ = [
    "EncodedBody",
    "FormPart",
    "JSON_CONTENT_TYPE",
    "audio_form_fields",
    "encode_audio_form",
    "encode_json_body",
    "file_part",
    "new_boundary",
    "omit_empty",
    "text_part",
]
