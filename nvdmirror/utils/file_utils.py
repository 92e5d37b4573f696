"""
File system utilities
"""
import os


def ensure_dir(directory):
    """
    Ensure directory exists, create if it doesn't.

    Intermediate directories are created as needed.

    Args:
        directory: Directory path

    Returns:
        Absolute path of the directory
    """
    os.makedirs(directory, exist_ok=True)
    return os.path.abspath(directory)


def get_feed_path(output_dir, filename):
    """Get path of the local copy of a feed file.

    Args:
        output_dir: Mirror output directory
        filename: Feed filename (last URL path segment)

    Returns:
        Absolute path to the local feed file
    """
    return os.path.abspath(os.path.join(output_dir, filename))
