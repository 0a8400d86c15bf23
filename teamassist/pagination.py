# teamassist/pagination.py
from django.core.paginator import EmptyPage
from rest_framework import pagination, serializers, status
from rest_framework.response import Response

DEFAULT_PAGE_SIZE = 10


class PaginationQuerySerializer(serializers.Serializer):
    pageSize = serializers.IntegerField(required=False, min_value=1, default=DEFAULT_PAGE_SIZE)
    pageNumber = serializers.IntegerField(required=False, min_value=1, default=1)


class WorkspacePageNumberPagination(pagination.PageNumberPagination):
    """
    Page-number pagination driven by ``pageSize`` and ``pageNumber``.

    Malformed values are rejected with a validation error instead of being
    replaced by defaults. Pages past the end are empty, not 404s.
    """
    page_size = DEFAULT_PAGE_SIZE
    page_query_param = 'pageNumber'
    page_size_query_param = 'pageSize'

    def paginate_queryset(self, queryset, request, view=None):
        query = PaginationQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        page_size = query.validated_data[self.page_size_query_param]
        page_number = query.validated_data[self.page_query_param]

        self.request = request
        paginator = self.django_paginator_class(queryset, page_size, allow_empty_first_page=False)
        try:
            self.page = paginator.page(page_number)
            items = list(self.page)
        except EmptyPage:
            self.page = None
            items = []

        self.pagination = {
            'page_size': page_size,
            'page_number': page_number,
            'total_count': paginator.count,
            'total_pages': paginator.num_pages,
            'skip': (page_number - 1) * page_size,
        }
        return items

    def get_paginated_response(self, data):
        return Response({**data, 'pagination': self.pagination}, status=status.HTTP_200_OK)
