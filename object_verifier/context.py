import os
from typing import Optional
from dotenv import load_dotenv
from .logger import LogController


_TRUE_VALUES = ('true', '1', 'yes', 'on')
_FALSE_VALUES = ('false', '0', 'no', 'off')


class VerifierContext():
    '''
    Holds the configuration and service references used while verifying batches of objects.
    Any function that receives this context will get an easy access to all variables declared/initialized within this object.
    '''

    def __init__(self):
        # Configuration
        self.source_name:                    str                     = None
        self.namespace:                      str                     = 'object_verifier'
        self.require_truthy:                 bool                    = True

        # Services
        self.logger:                         LogController           = None

    def confirm_all_mandatory_fields_are_initialized(self):
        '''Raises an exception if any of the mandatory context variables are not initialized.'''
        if not self.source_name:
            raise ValueError("Missing mandatory context variable: 'source_name'")
        if not self.namespace:
            raise ValueError("Missing mandatory context variable: 'namespace'")
        if not self.logger:
            raise ValueError("Missing mandatory context variable: 'logger'")
        if type(self.require_truthy) != bool:
            raise ValueError(f"'require_truthy' must be of type 'bool'. Got '{type(self.require_truthy)}' instead")


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Environment variable '{name}' must be a boolean. Got '{raw}' instead")


def load_context_from_env(dotenv_path: Optional[str] = None) -> VerifierContext:
    '''
    Build a VerifierContext from OBJECT_VERIFIER_* environment variables.
    Values from a .env file are loaded first, variables already set in the environment win.
    '''
    load_dotenv(dotenv_path)

    context = VerifierContext()
    context.source_name = os.getenv('OBJECT_VERIFIER_SOURCE_NAME')
    if not context.source_name:
        raise ValueError("Missing mandatory environment variable: 'OBJECT_VERIFIER_SOURCE_NAME'")
    context.namespace = os.getenv('OBJECT_VERIFIER_NAMESPACE', 'object_verifier')
    context.require_truthy = _parse_bool(
        'OBJECT_VERIFIER_REQUIRE_TRUTHY', os.getenv('OBJECT_VERIFIER_REQUIRE_TRUTHY', 'true')
    )
    context.logger = LogController(context.source_name, namespace=context.namespace)

    context.confirm_all_mandatory_fields_are_initialized()
    return context
