import django_filters

from casos.domain.enums import EstadoCaso, TipoCaso
from casos.domain.models import Caso


class CasoFilter(django_filters.FilterSet):
    tipo_caso = django_filters.ChoiceFilter(choices=TipoCaso.choices)
    estado = django_filters.ChoiceFilter(choices=EstadoCaso.choices)
    cliente = django_filters.CharFilter(field_name="cliente_nombre", lookup_expr="icontains")
    fecha_inicio = django_filters.DateFilter(field_name="fecha_creacion", lookup_expr="date__gte")
    fecha_fin = django_filters.DateFilter(field_name="fecha_creacion", lookup_expr="date__lte")
    supervisor_id = django_filters.NumberFilter(field_name="supervisor_id")

    class Meta:
        model = Caso
        fields = ("tipo_caso", "estado", "cliente", "fecha_inicio", "fecha_fin", "supervisor_id")
