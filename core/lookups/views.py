"""
Lookup API views.

Read endpoints are public and served from the process lookup cache.
Admin endpoints write to the database and refresh the cache on commit.
"""
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.permissions import AllowAny, IsAdminUser

from tp_portal.response_formatter import success_response
from .models import LookupHeader, Lookup
from .serializers import (
    CachedEntrySerializer,
    CachedHeaderSerializer,
    LookupHeaderSerializer,
    LookupValueSerializer,
)
from .services import LookupService, get_lookup_cache

MIN_SEARCH_LENGTH = 2


# ============================================================================
# Public read views
# ============================================================================

@api_view(['GET'])
@permission_classes([AllowAny])
def lookup_list(request):
    """
    All lookup headers with their values.

    GET /api/lookups/
    """
    cache = get_lookup_cache()
    data = []
    for header in cache.get_headers():
        item = CachedHeaderSerializer(header).data
        item['values'] = CachedEntrySerializer(cache.get_entries(header.lookup_type), many=True).data
        data.append(item)
    return success_response(data=data, message='Lookups retrieved successfully')


@api_view(['GET'])
@permission_classes([AllowAny])
def header_list(request):
    """
    All lookup headers without values.

    GET /api/lookups/headers/
    """
    headers = get_lookup_cache().get_headers()
    return success_response(
        data=CachedHeaderSerializer(headers, many=True).data,
        message='Lookup headers retrieved successfully'
    )


@api_view(['GET'])
@permission_classes([AllowAny])
def header_detail(request, pk):
    """GET /api/lookups/headers/<id>/"""
    header = get_lookup_cache().get_header_by_id(pk)
    if header is None:
        raise NotFound('Lookup header not found')
    return success_response(
        data=CachedHeaderSerializer(header).data,
        message='Lookup header retrieved successfully'
    )


@api_view(['GET'])
@permission_classes([AllowAny])
def lookups_by_type(request, lookup_type):
    """
    Values of a type (e.g., placement, required_format).
    Unknown types return an empty list.

    GET /api/lookups/type/<lookup_type>/
    """
    lookup_type = lookup_type.strip()
    if not lookup_type:
        raise ValidationError({'lookup_type': ['Lookup type is required']})
    entries = get_lookup_cache().get_entries(lookup_type)
    return success_response(
        data=CachedEntrySerializer(entries, many=True).data,
        message=f"Lookups for type '{lookup_type}' retrieved successfully"
    )


@api_view(['GET'])
@permission_classes([AllowAny])
def lookups_by_header(request, header_id):
    """GET /api/lookups/header/<header_id>/"""
    cache = get_lookup_cache()
    header = cache.get_header_by_id(header_id)
    if header is None:
        raise NotFound('Lookup header not found')
    return success_response(
        data=CachedEntrySerializer(cache.get_entries(header.lookup_type), many=True).data,
        message='Lookups retrieved successfully'
    )


@api_view(['GET'])
@permission_classes([AllowAny])
def lookup_detail(request, pk):
    """
    One value with its header info. Unknown ids raise LookupNotFound (404).

    GET /api/lookups/<id>/
    """
    cache = get_lookup_cache()
    entry = cache.get_entry(pk)
    data = CachedEntrySerializer(entry).data
    header = cache.get_header_by_id(entry.header_id)
    # None only if a refresh removed the header between the two reads
    data['header_description'] = header.description if header else ''
    return success_response(data=data, message='Lookup retrieved successfully')


@api_view(['GET'])
@permission_classes([AllowAny])
def lookup_search(request):
    """
    Search values by substring.

    GET /api/lookups/search/?q=<term>
    """
    search_term = (request.query_params.get('q') or '').strip()
    if not search_term:
        raise ValidationError({'q': ['Search term is required']})
    if len(search_term) < MIN_SEARCH_LENGTH:
        raise ValidationError({'q': [f'Search term must be at least {MIN_SEARCH_LENGTH} characters']})

    results = LookupValueSerializer(LookupService.search_lookups(search_term), many=True).data
    return success_response(
        data={
            'search_term': search_term,
            'count': len(results),
            'results': results,
        },
        message='Search results retrieved successfully'
    )


# ============================================================================
# Admin views
# ============================================================================

@api_view(['POST'])
@permission_classes([IsAdminUser])
def admin_header_create(request):
    """POST /api/lookups/admin/headers/"""
    serializer = LookupHeaderSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    header = LookupService.create_header(serializer.validated_data)
    return success_response(
        data=LookupHeaderSerializer(header).data,
        message='Lookup header created successfully',
        status_code=status.HTTP_201_CREATED
    )


@api_view(['PUT', 'DELETE'])
@permission_classes([IsAdminUser])
def admin_header_detail(request, pk):
    """
    Update or delete a lookup header.

    PUT/DELETE /api/lookups/admin/headers/<id>/
    """
    header = get_object_or_404(LookupHeader, pk=pk)

    if request.method == 'PUT':
        serializer = LookupHeaderSerializer(header, data=request.data)
        serializer.is_valid(raise_exception=True)
        updated = LookupService.update_header(pk, serializer.validated_data)
        return success_response(
            data=LookupHeaderSerializer(updated).data,
            message='Lookup header updated successfully'
        )

    LookupService.delete_header(pk)
    return success_response(message='Lookup header deleted successfully')


@api_view(['POST'])
@permission_classes([IsAdminUser])
def admin_value_create(request):
    """POST /api/lookups/admin/values/"""
    serializer = LookupValueSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    lookup = LookupService.create_value(serializer.validated_data)
    return success_response(
        data=LookupValueSerializer(lookup).data,
        message='Lookup value created successfully',
        status_code=status.HTTP_201_CREATED
    )


@api_view(['PUT', 'DELETE'])
@permission_classes([IsAdminUser])
def admin_value_detail(request, pk):
    """
    Update or delete a lookup value.

    PUT/DELETE /api/lookups/admin/values/<id>/
    """
    lookup = get_object_or_404(Lookup, pk=pk)

    if request.method == 'PUT':
        serializer = LookupValueSerializer(lookup, data=request.data)
        serializer.is_valid(raise_exception=True)
        updated = LookupService.update_value(pk, serializer.validated_data)
        return success_response(
            data=LookupValueSerializer(updated).data,
            message='Lookup value updated successfully'
        )

    LookupService.delete_value(pk)
    return success_response(message='Lookup value deleted successfully')


@api_view(['POST'])
@permission_classes([IsAdminUser])
def admin_cache_refresh(request):
    """
    Reload the lookup cache from the database.
    A database failure leaves the previous cache in place (503).

    POST /api/lookups/admin/refresh/
    """
    cache = get_lookup_cache()
    cache.refresh()
    return success_response(data=cache.stats(), message='Lookup cache refreshed')


@api_view(['GET'])
@permission_classes([IsAdminUser])
def admin_cache_status(request):
    """GET /api/lookups/admin/status/"""
    return success_response(data=get_lookup_cache().stats())
