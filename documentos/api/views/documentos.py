from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from casos.application.selectors.casos import get_case_for
from documentos.api.serializers.documento import (
    DescargaSerializer,
    DocumentoSerializer,
    DocumentoUploadSerializer,
)
from documentos.application.selectors.documentos import list_documents
from documentos.application.use_cases.manage_documents import (
    delete_document,
    document_download,
    upload_document,
)
from security.application.policies import IsActiveUser


class CasoDocumentosView(APIView):
    permission_classes = [IsActiveUser]
    parser_classes = [MultiPartParser, FormParser]
    throttle_scope = None

    def get_throttles(self):
        # Solo las subidas consumen la cuota "uploads"
        if self.request.method == "POST":
            self.throttle_scope = "uploads"
        return super().get_throttles()

    @extend_schema(tags=["Documentos"], operation_id="caso_documentos_list",
                   responses=DocumentoSerializer(many=True))
    def get(self, request, caso_id: int):
        caso, _ = get_case_for(request.user, caso_id, "can_view")
        return Response(DocumentoSerializer(list_documents(caso), many=True).data)

    @extend_schema(tags=["Documentos"], operation_id="caso_documentos_upload",
                   request={"multipart/form-data": DocumentoUploadSerializer},
                   responses={201: DocumentoSerializer})
    def post(self, request, caso_id: int):
        s = DocumentoUploadSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        doc = upload_document(s.to_input(caso_id), request.user)
        return Response(DocumentoSerializer(doc).data, status=status.HTTP_201_CREATED)


class DocumentoDetailView(APIView):
    permission_classes = [IsActiveUser]

    @extend_schema(tags=["Documentos"], operation_id="documentos_delete", responses={204: None})
    def delete(self, request, documento_id: int):
        delete_document(documento_id=documento_id, actor=request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=["Documentos"], operation_id="documentos_descargar",
               responses=DescargaSerializer)
class DocumentoDescargaView(APIView):
    permission_classes = [IsActiveUser]

    def get(self, request, documento_id: int):
        return Response(document_download(documento_id=documento_id, actor=request.user))
