"""
nvd-mirror — NVD vulnerability feed mirror.

Downloads the NVD CVE XML and JSON data feeds into a local directory
and publishes them to an S3 bucket, skipping feeds whose size has not
changed since the last run.
"""

__version__ = "1.0.0"
