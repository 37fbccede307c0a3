from rest_framework.exceptions import APIException


class CompetitionNotFoundError(APIException):

    def __init__(self, competition_id):
        self.status_code = 404
        self.detail = f"Competition {competition_id} does not exist"


class MissingParProfileError(APIException):

    def __init__(self, detail="The competition course does not have a complete 18 hole par profile"):
        self.status_code = 409
        self.detail = detail


class InvalidParProfileError(APIException):

    def __init__(self, detail):
        self.status_code = 400
        self.detail = detail


class InvalidScoreEntryError(APIException):

    def __init__(self, detail):
        self.status_code = 400
        self.detail = detail


class InvalidPointsRuleError(APIException):

    def __init__(self, detail):
        self.status_code = 400
        self.detail = detail
