"""
Type verification for loosely shaped data objects.
Provides the property verifier, its type tags, and the Logging / Context helpers used to verify whole batches.
"""

from .type_tags import TypeTag, coerce_type_tag, get_type_tag, is_truthy, is_type
from .verify import VERIFICATION_FAILED, normalize_config, verify_object_properties, find_failing_properties
from .logger import LogController
from .context import VerifierContext, load_context_from_env
from .data_processing_utils import verify_objects
