from s3_envstore.models import Environment


DEV_SEGMENT_PREFIX = "dev-"


def build_key(environment, category, path, dev_user=""):
    """Return ``<env>/[dev-<user>/]<category>/<path>``.

    The dev-user segment only appears in the development environment and
    only when ``dev_user`` is non-empty. Leading slashes on ``path`` are
    dropped; a trailing slash is kept so the result can be used as a
    listing prefix. Nothing is encoded or validated.
    """
    segments = [environment.value]
    if environment is Environment.DEVELOPMENT and dev_user:
        segments.append(f"{DEV_SEGMENT_PREFIX}{dev_user}")
    segments.append(category.value)
    path = path.lstrip("/") if path else ""
    if path:
        segments.append(path)
    return "/".join(segments)
