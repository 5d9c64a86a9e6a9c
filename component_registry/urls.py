"""
Root URL configuration for the component_registry project.

Routes:
  - /admin/               Django admin
  - /graphql              GraphQL endpoint (GraphiQL in the browser)
  - /.well-known/health   system-check report for runs outside Hurricane

Hurricane serves /alive, /ready and /startup on its own probe port, so
those paths are not routed here.
"""

from __future__ import annotations

from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path
from django.views.decorators.csrf import csrf_exempt
from graphene_django.views import GraphQLView

from apps.core import views as core_views

admin.site.site_header = "Component Registry"
admin.site.site_title = "Component Registry Admin"
admin.site.index_title = "Components"


urlpatterns = [
    path("admin/", admin.site.urls),
    path("graphql", csrf_exempt(GraphQLView.as_view(graphiql=True))),
    path(".well-known/health", core_views.health_check, name="health_check"),
]


# Static & media when running with DEBUG outside Hurricane's --static/--media
if settings.DEBUG:
    from django.contrib.staticfiles.urls import staticfiles_urlpatterns

    urlpatterns += staticfiles_urlpatterns()
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)


handler404 = "apps.core.views.error_404_view"
handler500 = "apps.core.views.error_500_view"
