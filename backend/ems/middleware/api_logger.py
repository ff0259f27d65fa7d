import time
from ems.log_app import loggers


def describe_route(request):
    """``route-name {leave_id=5}`` for resolved requests, the raw path otherwise."""
    match = getattr(request, "resolver_match", None)
    if match is None or not match.url_name:
        return request.path

    if not match.kwargs:
        return match.url_name

    ids = ", ".join(f"{key}={value}" for key, value in sorted(match.kwargs.items()))
    return f"{match.url_name} {{{ids}}}"


def describe_actor(request):
    actor = getattr(request, "user", None)
    if actor is None or not getattr(actor, "is_authenticated", False):
        return "Anonymous"
    return f"user {actor.id} ({actor.role})"


class APILoggingMiddleware:
    """One line per API call: route and record ids, acting user and role, outcome."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        start_time = time.time()

        try:
            response = self.get_response(request)

        except Exception:
            loggers.error(
                f"API Exception | {request.method} {describe_route(request)} | {describe_actor(request)}",
                exc_info=True
            )
            raise

        duration = round(time.time() - start_time, 3)
        line = (
            f"{request.method} {describe_route(request)} | "
            f"{describe_actor(request)} | "
            f"Status: {response.status_code} | "
            f"Duration: {duration}s"
        )

        # denied and failed calls go to warning.log as well
        if response.status_code >= 400:
            loggers.warning(line)
        else:
            loggers.info(line)

        return response
