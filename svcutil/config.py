"""Configuration settings shared by services using svcutil."""

import os


UPLOAD_FIELD_NAME = os.environ.get("SVCUTIL_UPLOAD_FIELD", "file")

CHECKSUM_FIELD_NAME = os.environ.get("SVCUTIL_CHECKSUM_FIELD", "checksum")

HTTP_TIMEOUT = float(os.environ.get("SVCUTIL_HTTP_TIMEOUT", "30"))

LOG_LEVEL = os.environ.get("SVCUTIL_LOG_LEVEL", os.environ.get("LOG_LEVEL", "INFO"))
