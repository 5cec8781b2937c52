"""
Integration tests — 真实 HTTP 请求打到 DRF View，验证完整流程。

用 Django test Client，走完：
  HTTP Request → urls.py → View → intake → services → store → Response

每个测试验证：status_code + response body 的统一格式。
store 是每个测试独立的、未灌 demo 数据的内存实例。
"""
import json
import pytest

from patientor.store import get_record_store


# -------------------------------------------------------------------
# Helper
# -------------------------------------------------------------------

def post_json(api_client, url, payload):
    """快捷方式：POST JSON，返回 (status_code, body)。"""
    response = api_client.post(url, data=json.dumps(payload), content_type='application/json')
    return response.status_code, json.loads(response.content)


def get_json(api_client, url):
    response = api_client.get(url)
    return response.status_code, json.loads(response.content)


def create_patient(api_client, payload):
    status, body = post_json(api_client, '/api/patients', payload)
    assert status == 201
    return body


# ===================================================================
# Misc endpoints
# ===================================================================

@pytest.mark.django_db
class TestMiscEndpoints:

    def test_ping(self, api_client):
        status, body = get_json(api_client, '/api/ping')
        assert status == 200
        assert body == {'message': 'This is some data from the backend!'}

    def test_diagnoses(self, api_client):
        status, body = get_json(api_client, '/api/diagnoses')
        assert status == 200
        thumb = next(d for d in body if d['code'] == 'S62.5')
        assert thumb['name'] == 'Fracture of thumb'


# ===================================================================
# Patients
# ===================================================================

@pytest.mark.django_db
class TestPatients:

    def test_create_patient_success(self, api_client, sample_patient_payload):
        status, body = post_json(api_client, '/api/patients', sample_patient_payload)

        assert status == 201
        assert body['id']
        assert body['name'] == 'Ada'
        assert body['gender'] == 'female'
        assert body['occupation'] == 'engineer'
        assert body['entries'] == []
        # 可选字段缺失就不输出，不是 null
        assert 'dateOfBirth' not in body
        assert 'ssn' not in body
        # 不应有 type 字段（type 只在错误时出现）
        assert 'type' not in body
        assert get_record_store().count() == 1

    def test_create_patient_missing_gender(self, api_client, sample_patient_payload):
        del sample_patient_payload['gender']
        status, body = post_json(api_client, '/api/patients', sample_patient_payload)

        assert status == 400
        assert body['type'] == 'validation_error'
        assert body['message'] == 'Incorrect or missing gender'
        assert body['detail']['field'] == 'gender'
        assert get_record_store().count() == 0

    def test_malformed_json(self, api_client):
        response = api_client.post('/api/patients', data='{not json', content_type='application/json')
        body = json.loads(response.content)

        assert response.status_code == 400
        assert body['type'] == 'validation_error'

    def test_list_omits_entries(self, api_client, sample_patient_payload):
        created = create_patient(api_client, sample_patient_payload)
        status, body = get_json(api_client, '/api/patients')

        assert status == 200
        assert [p['id'] for p in body] == [created['id']]
        assert 'entries' not in body[0]

    def test_get_patient(self, api_client, sample_patient_payload):
        created = create_patient(api_client, sample_patient_payload)
        status, body = get_json(api_client, f"/api/patients/{created['id']}")

        assert status == 200
        assert body == created

    def test_get_unknown_patient(self, api_client):
        status, body = get_json(api_client, '/api/patients/does-not-exist')

        assert status == 404
        assert body['type'] == 'not_found'
        assert body['code'] == 'PATIENT_NOT_FOUND'
        assert body['detail']['id'] == 'does-not-exist'


# ===================================================================
# Entries
# ===================================================================

@pytest.mark.django_db
class TestEntries:

    def test_end_to_end_hospital_entry(self, api_client, sample_patient_payload, hospital_payload):
        patient = create_patient(api_client, sample_patient_payload)

        status, entry = post_json(api_client, f"/api/patients/{patient['id']}/entries", hospital_payload)
        assert status == 201
        assert entry['id']
        assert entry['type'] == 'Hospital'
        assert entry['date'] == '2024-05-01'
        assert entry['description'] == 'x'
        assert entry['specialist'] == 'Dr. Y'
        assert entry['discharge'] == {'date': '2024-05-03', 'criteria': 'recovered'}
        assert entry['diagnosisCodes'] == []

        _, stored = get_json(api_client, f"/api/patients/{patient['id']}")
        assert stored['entries'] == [entry]

    def test_entries_keep_submission_order(self, api_client, sample_patient_payload,
                                           health_check_payload, occupational_payload):
        patient = create_patient(api_client, sample_patient_payload)
        url = f"/api/patients/{patient['id']}/entries"
        _, first = post_json(api_client, url, health_check_payload)
        _, second = post_json(api_client, url, occupational_payload)

        _, stored = get_json(api_client, f"/api/patients/{patient['id']}")
        assert [e['id'] for e in stored['entries']] == [first['id'], second['id']]
        assert stored['entries'][1]['sickLeave'] == {'startDate': '2019-08-05', 'endDate': '2019-08-28'}

    def test_unknown_patient_returns_404(self, api_client, hospital_payload):
        status, body = post_json(api_client, '/api/patients/nope/entries', hospital_payload)

        assert status == 404
        assert body['type'] == 'not_found'
        assert get_record_store().count() == 0

    def test_unknown_type_returns_400(self, api_client, sample_patient_payload, hospital_payload):
        patient = create_patient(api_client, sample_patient_payload)
        hospital_payload['type'] = 'Dentist'
        status, body = post_json(api_client, f"/api/patients/{patient['id']}/entries", hospital_payload)

        assert status == 400
        assert body['code'] == 'UNKNOWN_ENTRY_TYPE'
        assert body['message'] == 'Unknown or missing entry type'

    def test_invalid_rating_returns_400(self, api_client, sample_patient_payload, health_check_payload):
        patient = create_patient(api_client, sample_patient_payload)
        health_check_payload['healthCheckRating'] = 4
        status, body = post_json(api_client, f"/api/patients/{patient['id']}/entries", health_check_payload)

        assert status == 400
        assert body['message'] == 'Invalid healthCheckRating'
        _, stored = get_json(api_client, f"/api/patients/{patient['id']}")
        assert stored['entries'] == []

    def test_non_array_diagnosis_codes_rejected(self, api_client, sample_patient_payload, hospital_payload):
        patient = create_patient(api_client, sample_patient_payload)
        hospital_payload['diagnosisCodes'] = 5
        status, body = post_json(api_client, f"/api/patients/{patient['id']}/entries", hospital_payload)

        assert status == 400
        assert body['message'] == 'Incorrect diagnosisCodes'
        assert body['detail']['field'] == 'diagnosisCodes'

        status, stored = get_json(api_client, f"/api/patients/{patient['id']}")
        assert status == 200
        assert stored['entries'] == []

    def test_partial_sick_leave_dropped(self, api_client, sample_patient_payload, occupational_payload):
        patient = create_patient(api_client, sample_patient_payload)
        occupational_payload['sickLeave'] = {'startDate': '2024-01-01'}
        status, entry = post_json(api_client, f"/api/patients/{patient['id']}/entries", occupational_payload)

        assert status == 201
        assert 'sickLeave' not in entry

    def test_missing_discharge_returns_400(self, api_client, sample_patient_payload, hospital_payload):
        patient = create_patient(api_client, sample_patient_payload)
        hospital_payload['discharge'] = {'date': '2024-05-03'}
        status, body = post_json(api_client, f"/api/patients/{patient['id']}/entries", hospital_payload)

        assert status == 400
        assert body['code'] == 'MISSING_DISCHARGE'
        assert body['detail']['field'] == 'discharge'
