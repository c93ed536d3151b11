from flask import request


def get_json_body():
    """Return the request's JSON object, or an empty dict for anything else."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return {}
    return data
