from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from almacenamiento.api.serializers.almacenamiento import (
    ArchivoSerializer,
    ArchivoUploadSerializer,
    CarpetaCreateSerializer,
    CarpetaSerializer,
)
from almacenamiento.application.selectors.almacenamiento import list_files, list_folders
from almacenamiento.application.use_cases.manage_storage import (
    create_folder,
    delete_file,
    file_download,
    upload_file,
)
from common.domain.errors import ValidationError
from documentos.api.serializers.documento import DescargaSerializer
from security.application.policies import CanManageStorage


class CarpetasView(APIView):
    permission_classes = [CanManageStorage]

    @extend_schema(tags=["Almacenamiento"], operation_id="s3_carpetas_list",
                   responses=CarpetaSerializer(many=True))
    def get(self, request):
        return Response(CarpetaSerializer(list_folders(), many=True).data)

    @extend_schema(tags=["Almacenamiento"], operation_id="s3_carpetas_create",
                   request=CarpetaCreateSerializer, responses={201: CarpetaSerializer})
    def post(self, request):
        s = CarpetaCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        carpeta = create_folder(s.to_input(), request.user)
        return Response(CarpetaSerializer(carpeta).data, status=status.HTTP_201_CREATED)


class ArchivosView(APIView):
    permission_classes = [CanManageStorage]
    parser_classes = [MultiPartParser, FormParser]
    throttle_scope = None

    def get_throttles(self):
        if self.request.method == "POST":
            self.throttle_scope = "uploads"
        return super().get_throttles()

    @extend_schema(tags=["Almacenamiento"], operation_id="s3_archivos_list",
                   parameters=[OpenApiParameter("carpeta_id", int, required=False)],
                   responses=ArchivoSerializer(many=True))
    def get(self, request):
        carpeta_id = request.query_params.get("carpeta_id")
        if carpeta_id is not None and not carpeta_id.isdigit():
            raise ValidationError("carpeta_id debe ser numérico", code="CARPETA_ID_INVALIDO")
        archivos = list_files(int(carpeta_id) if carpeta_id else None)
        return Response(ArchivoSerializer(archivos, many=True).data)

    @extend_schema(tags=["Almacenamiento"], operation_id="s3_archivos_upload",
                   request={"multipart/form-data": ArchivoUploadSerializer},
                   responses={201: ArchivoSerializer})
    def post(self, request):
        s = ArchivoUploadSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        archivo = upload_file(s.to_input(), request.user)
        return Response(ArchivoSerializer(archivo).data, status=status.HTTP_201_CREATED)


class ArchivoDetailView(APIView):
    permission_classes = [CanManageStorage]

    @extend_schema(tags=["Almacenamiento"], operation_id="s3_archivos_delete",
                   responses={204: None})
    def delete(self, request, archivo_id: int):
        delete_file(archivo_id=archivo_id, actor=request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=["Almacenamiento"], operation_id="s3_archivos_descargar",
               responses=DescargaSerializer)
class ArchivoDescargaView(APIView):
    permission_classes = [CanManageStorage]

    def get(self, request, archivo_id: int):
        return Response(file_download(archivo_id=archivo_id))
