"""Student API - Presentation Layer (SoC)"""
from flask_restful import Resource
from students_service.exceptions.error_handler import handle_service_error, create_success_response
from students_service.utils.formatting.json_utils import serialize_value
from students_service.utils.validation.input_validator import (
    InputValidator, get_json_data, get_single_query_param, get_int_query_param
)

def _result_response(result, status: int = 200):
    """OperationResult -> response; failures raise and go through handle_service_error"""
    return create_success_response(serialize_value(result.unwrap()), status)

class StudentServiceResource(Resource):
    def __init__(self, service):
        self.service = service

class HealthCheck(Resource):
    def get(self):
        return {"message": "Students service is running"}, 200

class Students(StudentServiceResource):
    def post(self):
        try:
            data = InputValidator.validate_student_request(get_json_data())
            result = self.service.add_student(data["id"], data["name"], data["phone"])
            return _result_response(result, 201)
        except Exception as e:
            return handle_service_error(e)

class StudentDetail(StudentServiceResource):
    def delete(self, student_id):
        try:
            return _result_response(self.service.remove_student(student_id))
        except Exception as e:
            return handle_service_error(e)

class StudentPhone(StudentServiceResource):
    def put(self, student_id):
        try:
            data = get_json_data()
            InputValidator.validate_required_fields(data, "phone")
            return _result_response(self.service.update_phone(student_id, str(data["phone"])))
        except Exception as e:
            return handle_service_error(e)

class StudentMarks(StudentServiceResource):
    def get(self, student_id):
        try:
            subject = get_single_query_param("subject", required=False)
            date_from = get_single_query_param("from", required=False)
            date_to = get_single_query_param("to", required=False)

            if subject is not None:
                result = self.service.get_student_subject_marks(student_id, subject)
            elif date_from is not None or date_to is not None:
                result = self.service.get_student_marks_at_dates(
                    student_id,
                    InputValidator.to_date(get_single_query_param("from"), "from"),
                    InputValidator.to_date(get_single_query_param("to"), "to")
                )
            else:
                result = self.service.get_marks(student_id)
            return _result_response(result)
        except Exception as e:
            return handle_service_error(e)

    def post(self, student_id):
        try:
            mark = InputValidator.validate_mark_request(get_json_data())
            return _result_response(self.service.add_mark(student_id, mark), 201)
        except Exception as e:
            return handle_service_error(e)

class StudentByPhone(StudentServiceResource):
    def get(self, phone):
        try:
            # absent phone is a null result, not a 404
            student = self.service.get_student_by_phone(phone)
            return create_success_response(serialize_value(student))
        except Exception as e:
            return handle_service_error(e)

class StudentsByPhonePrefix(StudentServiceResource):
    def get(self):
        try:
            prefix = get_single_query_param("prefix", required=False, default="")
            return create_success_response(serialize_value(self.service.get_students_by_phone_prefix(prefix)))
        except Exception as e:
            return handle_service_error(e)

class StudentsGoodMarks(StudentServiceResource):
    def get(self):
        try:
            threshold = get_int_query_param("threshold")
            subject = get_single_query_param("subject", required=False)
            if subject is not None:
                students = self.service.get_students_all_good_marks_subject(subject, threshold)
            else:
                students = self.service.get_students_all_good_marks(threshold)
            return create_success_response(serialize_value(students))
        except Exception as e:
            return handle_service_error(e)

class StudentsFewMarks(StudentServiceResource):
    def get(self):
        try:
            threshold = get_int_query_param("threshold")
            return create_success_response(serialize_value(self.service.get_students_few_marks(threshold)))
        except Exception as e:
            return handle_service_error(e)

class StudentsMarksAmount(StudentServiceResource):
    def get(self):
        try:
            min_amount = get_int_query_param("min")
            max_amount = get_int_query_param("max")
            students = self.service.get_students_marks_amount_between(min_amount, max_amount)
            return create_success_response(serialize_value(students))
        except Exception as e:
            return handle_service_error(e)

class StudentsAvgScore(StudentServiceResource):
    def get(self):
        try:
            threshold = get_int_query_param("threshold")
            return create_success_response(serialize_value(self.service.get_student_avg_score_greater(threshold)))
        except Exception as e:
            return handle_service_error(e)

class BestStudents(StudentServiceResource):
    def get(self):
        try:
            n_students = get_int_query_param("n")
            return create_success_response(self.service.get_best_students(n_students))
        except Exception as e:
            return handle_service_error(e)

class WorstStudents(StudentServiceResource):
    def get(self):
        try:
            n_students = get_int_query_param("n")
            return create_success_response(self.service.get_worst_students(n_students))
        except Exception as e:
            return handle_service_error(e)
