from django.urls import path

from filebook.autocomplete_views import RelatedNamesAutocomplete
from filebook.models import Seat, Department, Branch, Organization

app_name = 'filebook'

urlpatterns = [
    # 🔍 Имена для полей "по имени"
    path('autocomplete/seat-names/', RelatedNamesAutocomplete.as_view(model=Seat), name='seat-names'),
    path('autocomplete/department-names/', RelatedNamesAutocomplete.as_view(model=Department), name='department-names'),
    path('autocomplete/branch-names/', RelatedNamesAutocomplete.as_view(model=Branch), name='branch-names'),
    path('autocomplete/organization-names/', RelatedNamesAutocomplete.as_view(model=Organization), name='organization-names'),
]
