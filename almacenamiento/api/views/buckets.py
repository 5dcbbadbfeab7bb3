from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from almacenamiento.api.serializers.almacenamiento import (
    BucketCreateSerializer,
    BucketListSerializer,
    BucketSerializer,
)
from almacenamiento.application.use_cases.manage_buckets import create_bucket, list_buckets
from security.application.policies import IsAdmin


class BucketsView(APIView):
    permission_classes = [IsAdmin]

    @extend_schema(tags=["Admin · Buckets"], operation_id="buckets_list",
                   responses=BucketListSerializer)
    def get(self, request):
        return Response(BucketListSerializer(list_buckets()).data)

    @extend_schema(tags=["Admin · Buckets"], operation_id="buckets_create",
                   request=BucketCreateSerializer, responses={201: BucketSerializer})
    def post(self, request):
        s = BucketCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        bucket = create_bucket(s.to_input(), request.user)
        return Response(
            {"message": "Bucket creado exitosamente", "bucket": BucketSerializer(bucket).data},
            status=status.HTTP_201_CREATED,
        )
