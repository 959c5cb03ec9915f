from ._attachments import Attachment, is_attachment
from ._fields import (
    is_value_sequence,
    iter_fields,
    register_param_fields,
    unregister_param_fields,
)
from ._headers import HeaderStore, is_multipart_media_type
from ._logs import logger, setup_logging
from ._multipart import MultipartResolver, ResolvedPayload
from ._multivalue import MultiValueMap
from ._serialization import to_json_text
from ._uri import append_query_params, expand_template, parse_uri

__all__ = [
    "Attachment",
    "HeaderStore",
    "MultiValueMap",
    "MultipartResolver",
    "ResolvedPayload",
    "append_query_params",
    "expand_template",
    "is_attachment",
    "is_multipart_media_type",
    "is_value_sequence",
    "iter_fields",
    "logger",
    "parse_uri",
    "register_param_fields",
    "setup_logging",
    "to_json_text",
    "unregister_param_fields",
]
