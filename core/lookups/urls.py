from django.urls import path
from . import views

app_name = 'lookups'

urlpatterns = [
    path('', views.lookup_list, name='lookup-list'),
    path('headers/', views.header_list, name='header-list'),
    path('headers/<int:pk>/', views.header_detail, name='header-detail'),
    path('type/<str:lookup_type>/', views.lookups_by_type, name='lookups-by-type'),
    path('header/<int:header_id>/', views.lookups_by_header, name='lookups-by-header'),
    path('search/', views.lookup_search, name='lookup-search'),

    # Administration
    path('admin/headers/', views.admin_header_create, name='admin-header-create'),
    path('admin/headers/<int:pk>/', views.admin_header_detail, name='admin-header-detail'),
    path('admin/values/', views.admin_value_create, name='admin-value-create'),
    path('admin/values/<int:pk>/', views.admin_value_detail, name='admin-value-detail'),
    path('admin/refresh/', views.admin_cache_refresh, name='admin-cache-refresh'),
    path('admin/status/', views.admin_cache_status, name='admin-cache-status'),

    # Must stay last
    path('<int:pk>/', views.lookup_detail, name='lookup-detail'),
]
