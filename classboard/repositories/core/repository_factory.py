"""Repository Factory - DRY Implementation"""
from classboard.repositories.submission.submission_repo import SubmissionRepo
from classboard.repositories.student.enrollment_repo import EnrollmentRepo

class RepositoryFactory:
    """Centralized repository creation (DRY principle)"""

    @classmethod
    def get_submission_repo(cls) -> SubmissionRepo:
        """Get submission repository instance with caching"""
        if not hasattr(cls, '_submission_repo'):
            cls._submission_repo = SubmissionRepo()
        return cls._submission_repo

    @classmethod
    def get_enrollment_repo(cls) -> EnrollmentRepo:
        """Get enrollment repository instance with caching"""
        if not hasattr(cls, '_enrollment_repo'):
            cls._enrollment_repo = EnrollmentRepo()
        return cls._enrollment_repo
