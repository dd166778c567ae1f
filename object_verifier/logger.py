import time
import json
import logging
from typing import Optional, List


class LogController:
    def __init__(self, source_name: str, namespace: Optional[str] = None):
        """namespace: Shared CloudWatch namespace for metrics."""
        self.namespace = namespace or 'object_verifier'
        self.logger = self._setup_logging()
        self.source_name = source_name
        self.emf_dimensions = [["Outcome", "Source"]]

    def _setup_logging(self) -> logging.Logger:
        """Configure the module logger once, messages are printed as-is."""
        logger = logging.getLogger(__name__)
        if not logger.handlers:
            logger.setLevel(logging.INFO)
            ch = logging.StreamHandler()
            ch.setFormatter(logging.Formatter('%(message)s'))
            logger.addHandler(ch)
        return logger

    def _emf_payload(self, outcome: str, metric_name: str) -> dict:
        cw_metrics = [{
            "Namespace": self.namespace,
            "Dimensions": self.emf_dimensions,
            "Metrics": [{"Name": metric_name, "Unit": "Count"}]
        }]
        return {
            "_aws": {"Timestamp": int(time.time() * 1000), "CloudWatchMetrics": cw_metrics},
            "Outcome": outcome,
            "Source": self.source_name,
            metric_name: 1,
        }

    def log_verification_error(self, item: dict, failing_keys: List[str]) -> str:
        '''
        Use this function to log outcome 'verification_error', one call per rejected object.
        Returns the emitted JSON line.
        '''
        if type(failing_keys) != list:
            raise ValueError(f"'failing_keys' must be of type 'list[str]'. Got '{type(failing_keys)}' instead")

        payload = self._emf_payload('verification_error', 'VerificationFailureCount')

        # Add additional fields.
        payload.update({
            "FailingKeys": failing_keys,
            "item": item,
            "message": f"failed to verify object - mismatched properties: {', '.join(failing_keys)}",
        })

        # Raw input may hold values json can't encode (dates, functions, ...).
        line = json.dumps(payload, default=str)
        self.logger.info(line)
        return line

    def log_processing_error(self, message: str) -> str:
        '''Use this function to log these 'processing_error' outcome, these are generic errors anywhere in the code'''
        if not message:
            raise ValueError("'message' must be provided.")

        payload = self._emf_payload('processing_error', 'ProcessingErrorCount')
        payload.update({
            'message': message,
        })

        line = json.dumps(payload, default=str)
        self.logger.info(line)
        return line

    def log_info(self, message: str):
        '''Prints any general purpose (informational) message'''
        payload = f'Info: {message}'
        self.logger.info(payload)

    def log_stats(self, stats: dict):
        """Simplified json print with some padding for visual separation."""
        if type(stats) != dict:
            raise ValueError(f"'stats' must be of type 'dict'. Got '{type(stats)}' instead")

        payload = (
            "\n"  # Padding above.
            "*******************************************************************************************\n"
            f"Stats: {json.dumps(stats)}\n"
            "*******************************************************************************************"
            "\n"  # Padding below.
        )
        self.logger.info(payload)
