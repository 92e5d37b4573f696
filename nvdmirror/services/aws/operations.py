"""
Low-level S3 primitive operations.

Provides the object-store side of the mirror: bucket existence,
object size lookup and file upload.
"""
from typing import Optional

from botocore.exceptions import ClientError

from ...utils.logger import get_logger

log = get_logger(__name__)

# Error codes S3 uses for a missing key (HEAD responses only carry the
# HTTP status, GET-style responses carry the named code).
_NOT_FOUND_CODES = {"404", "NoSuchKey", "NotFound"}
_NO_BUCKET_CODES = {"404", "NoSuchBucket", "NotFound"}


def _error_code(error: ClientError) -> str:
    return str(error.response.get("Error", {}).get("Code", ""))


class S3Operations:
    """Primitive S3 operations against a single bucket.

    Args:
        bucket_name: S3 bucket name
        s3_client: boto3 S3 client
    """

    def __init__(self, bucket_name, s3_client):
        self.bucket_name = bucket_name
        self.s3_client = s3_client

    def bucket_exists(self) -> bool:
        """Check if the bucket exists.

        A bucket that exists but belongs to someone else (403) still
        counts as existing.

        Returns:
            True if the bucket exists

        Raises:
            ClientError: For failures other than not-found / forbidden
        """
        try:
            self.s3_client.head_bucket(Bucket=self.bucket_name)
            return True
        except ClientError as e:
            code = _error_code(e)
            if code in _NO_BUCKET_CODES:
                return False
            if code in ("403", "AccessDenied"):
                return True
            raise

    def get_object_size(self, s3_key) -> Optional[int]:
        """Get the stored size of an object.

        Args:
            s3_key: S3 object key

        Returns:
            Content length in bytes, or None if the object does not exist

        Raises:
            ClientError: For failures other than not-found
        """
        try:
            response = self.s3_client.head_object(Bucket=self.bucket_name, Key=s3_key)
        except ClientError as e:
            if _error_code(e) in _NOT_FOUND_CODES:
                log.debug("No stored object for %s", s3_key)
                return None
            raise
        return int(response["ContentLength"])

    def upload_file(self, local_path, s3_key):
        """Upload file to S3, replacing any existing object.

        Args:
            local_path: Local file path
            s3_key: S3 object key
        """
        self.s3_client.upload_file(local_path, self.bucket_name, s3_key)
        log.debug("Uploaded %s to s3://%s/%s", local_path, self.bucket_name, s3_key)
