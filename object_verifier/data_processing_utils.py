from collections.abc import Mapping
from .context import VerifierContext
from .verify import VERIFICATION_FAILED, normalize_config, find_failing_properties, verify_object_properties


def verify_objects(context: VerifierContext, raw_objects: list[dict], config: Mapping):
    '''
    Verify every object of a batch against one config.
    Rejected objects are logged with their failing keys and skipped, the rest of the batch continues.
    Returns (verified_objects, verification_rate).
    '''
    verified_objects = []

    if not isinstance(raw_objects, list):
        raise ValueError(f"'raw_objects' must be of type 'list[dict]'. Got '{type(raw_objects)}' instead")
    # A bad config is a caller bug, fail before touching the batch.
    config = normalize_config(config)

    context.logger.log_info(f'Verifying {len(raw_objects)} objects against {len(config)} properties.')

    for raw in raw_objects:
        try:
            verified = verify_object_properties(raw, config, require_truthy=context.require_truthy)
            if verified is VERIFICATION_FAILED:
                failing_keys = find_failing_properties(raw, config, require_truthy=context.require_truthy)
                context.logger.log_verification_error(raw, failing_keys)
                continue
            verified_objects.append(verified)
        except Exception as e:
            context.logger.log_processing_error(f'Failed to verify object - {str(e)} Object: {raw}')
            continue  # Continue with the next object.

    verification_rate = (len(verified_objects) / len(raw_objects) * 100) if raw_objects else 0

    context.logger.log_stats({
        'total_objects': len(raw_objects),
        'verified_objects': len(verified_objects),
        'verification_rate': round(verification_rate, 2),
    })

    return verified_objects, verification_rate
