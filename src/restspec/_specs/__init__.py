from ._body_spec import BodySpec
from ._form_spec import FormSpec
from ._header_spec import HeaderSpec
from ._method_spec import MethodSpec
from ._uri_spec import UriSpec

__all__ = [
    "BodySpec",
    "FormSpec",
    "HeaderSpec",
    "MethodSpec",
    "UriSpec",
]
