import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from . import services
from .serializers import (
    serialize_diagnosis,
    serialize_entry,
    serialize_patient,
    serialize_patient_summary,
)

logger = logging.getLogger(__name__)


class PingView(APIView):
    """GET /api/ping - Liveness probe"""

    def get(self, request):
        return Response({'message': 'This is some data from the backend!'})


class DiagnosisListView(APIView):
    """GET /api/diagnoses - Diagnosis catalog"""

    def get(self, request):
        return Response([serialize_diagnosis(d) for d in services.list_diagnoses()])


class PatientListView(APIView):
    """
    GET  /api/patients - Patient summaries (entries omitted)
    POST /api/patients - Validate and create a patient
    """

    def get(self, request):
        return Response([serialize_patient_summary(p) for p in services.list_patients()])

    def post(self, request):
        patient = services.submit_patient(request.data)
        logger.info("Patient created: id=%s", patient.id)
        return Response(serialize_patient(patient), status=status.HTTP_201_CREATED)


class PatientDetailView(APIView):
    """GET /api/patients/<patient_id> - Patient with full journal"""

    def get(self, request, patient_id):
        patient = services.get_patient(patient_id)
        return Response(serialize_patient(patient))


class PatientEntryListView(APIView):
    """POST /api/patients/<patient_id>/entries - Validate and append a journal entry"""

    def post(self, request, patient_id):
        entry = services.submit_entry(patient_id, request.data)
        logger.info("Entry appended: patient_id=%s entry_id=%s type=%s",
                    patient_id, entry.id, entry.type.value)
        return Response(serialize_entry(entry), status=status.HTTP_201_CREATED)
