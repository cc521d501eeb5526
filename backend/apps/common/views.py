from django.conf import settings
from django.http import JsonResponse
import time
from redis.exceptions import RedisError

from .logger import get_logger
from .store import get_document_store_client

logger = get_logger(__name__).bind(component='common', layer='health')


def _redis_ping(client=None):
    started = time.time()
    client = client or get_document_store_client()
    try:
        pong = client.ping()
        latency = round((time.time() - started) * 1000, 2)
        result = {'status': 'ok' if pong else 'fail', 'latency_ms': latency}
        if result['status'] == 'ok':
            logger.debug('Redis health check succeeded', latency_ms=latency)
        else:
            logger.warning('Redis health check returned unexpected response')
        return result
    except RedisError as e:
        logger.warning('Redis health check failed', error=str(e), exception=e.__class__.__name__)
        return {'status': 'fail', 'error': str(e)}


def live_health(request):
    """Liveness probe: process is up and can service requests."""
    logger.debug('Liveness probe served')
    return JsonResponse({'status': 'alive'})


def ready_health(request):
    """Readiness probe: verifies the document store answers."""
    checks = {'documentStore': _redis_ping()}
    failing = [name for name, r in checks.items() if r.get('status') == 'fail']
    overall_status = 'ok' if not failing else 'degraded'
    http_status = 200 if not failing else 503
    payload = {
        'status': overall_status,
        'checks': checks,
        'seedOnStartup': settings.SEED_CARTS_ON_STARTUP,
    }
    logger.info('Readiness probe evaluated', status=overall_status, failing_components=failing)
    return JsonResponse(payload, status=http_status)
