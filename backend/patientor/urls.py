from django.urls import path
from .views import (
    DiagnosisListView,
    PatientDetailView,
    PatientEntryListView,
    PatientListView,
    PingView,
)

urlpatterns = [
    path('ping', PingView.as_view(), name='ping'),
    path('diagnoses', DiagnosisListView.as_view(), name='diagnosis-list'),
    path('patients', PatientListView.as_view(), name='patient-list'),
    path('patients/<str:patient_id>', PatientDetailView.as_view(), name='patient-detail'),
    path('patients/<str:patient_id>/entries', PatientEntryListView.as_view(), name='patient-entries'),
]
