from drf_spectacular.utils import extend_schema
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.renderers import TemplateHTMLRenderer
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common import get_logger
from .container import build_session_store
from .protocols import SessionStoreProtocol

logger = get_logger(__name__).bind(component='session', layer='view')

HOME_TEMPLATE = 'session/home.html'


def _param(request, name):
    """Read ``name`` from the form body first, then from the query string."""
    value = request.data.get(name) if hasattr(request.data, 'get') else None
    if value in (None, ''):
        value = request.query_params.get(name)
    return value


@extend_schema(exclude=True)
class HomeView(APIView):
    renderer_classes = [TemplateHTMLRenderer]
    parser_classes = [FormParser, MultiPartParser]
    store_factory = staticmethod(build_session_store)

    def render_home(self, store: SessionStoreProtocol):
        store.ensure()
        return Response(
            {'session_attribute_names': store.attribute_names()},
            template_name=HOME_TEMPLATE,
        )

    def get(self, request):
        return self.render_home(self.store_factory(request))

    def post(self, request):
        return self.render_home(self.store_factory(request))


@extend_schema(exclude=True)
class SetValueView(HomeView):
    log = logger.bind(view='SetValueView')

    def _store_value(self, request):
        store = self.store_factory(request)
        session_id = store.ensure()
        key = _param(request, 'key')
        value = _param(request, 'value')
        if key and value:
            store.set(key, value)
            self.log.info('Session attribute set', session_id=session_id, key=key)
        else:
            self.log.debug('Ignoring incomplete session attribute', has_key=bool(key), has_value=bool(value))
        return self.render_home(store)

    def get(self, request):
        return self._store_value(request)

    def post(self, request):
        return self._store_value(request)
