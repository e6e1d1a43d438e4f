from dotenv import load_dotenv
load_dotenv()

import os
from flask import Flask
from flask_restful import Api
from students_service.config.log_config import setup_logging
from students_service.students_central_db import close_client
from students_service.services.students_service import StudentsService
from students_service.api.student_api import (
    HealthCheck, Students, StudentDetail, StudentPhone, StudentMarks, StudentByPhone,
    StudentsByPhonePrefix, StudentsGoodMarks, StudentsFewMarks, StudentsMarksAmount,
    StudentsAvgScore, BestStudents, WorstStudents
)

def add_api(app: Flask, service: StudentsService) -> Api:
    api = Api(app, catch_all_404s=True)
    kwargs = {"service": service}

    api.add_resource(HealthCheck, "/")

    # Student lifecycle
    api.add_resource(Students, "/api/v1/students", resource_class_kwargs=kwargs)
    api.add_resource(StudentDetail, "/api/v1/students/<int(signed=True):student_id>", resource_class_kwargs=kwargs)
    api.add_resource(StudentPhone, "/api/v1/students/<int(signed=True):student_id>/phone", resource_class_kwargs=kwargs)
    api.add_resource(StudentMarks, "/api/v1/students/<int(signed=True):student_id>/marks", resource_class_kwargs=kwargs)

    # Student lookups
    api.add_resource(StudentByPhone, "/api/v1/students/phone/<string:phone>", resource_class_kwargs=kwargs)
    api.add_resource(StudentsByPhonePrefix, "/api/v1/students/phone-prefix", resource_class_kwargs=kwargs)
    api.add_resource(StudentsGoodMarks, "/api/v1/students/good-marks", resource_class_kwargs=kwargs)
    api.add_resource(StudentsFewMarks, "/api/v1/students/few-marks", resource_class_kwargs=kwargs)
    api.add_resource(StudentsMarksAmount, "/api/v1/students/marks-amount", resource_class_kwargs=kwargs)

    # Rankings
    api.add_resource(StudentsAvgScore, "/api/v1/students/avg-score", resource_class_kwargs=kwargs)
    api.add_resource(BestStudents, "/api/v1/students/best", resource_class_kwargs=kwargs)
    api.add_resource(WorstStudents, "/api/v1/students/worst", resource_class_kwargs=kwargs)
    return api

def create_app(service: StudentsService = None) -> Flask:
    setup_logging()
    app = Flask(__name__)
    add_api(app, service or StudentsService())
    return app

def main() -> None:
    app = create_app()
    try:
        app.run(host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "5000")))
    finally:
        close_client()

if __name__ == "__main__":
    main()
