"""Notification and UI texts in Korean (default) and English."""
from typing import Dict

SUPPORTED_LANGUAGES = ("ko", "en")

MESSAGES: Dict[str, Dict[str, str]] = {
    "ko": {
        "login.success": "로그인 성공",
        "login.welcome": "{name}님 환영합니다!",
        "login.failure": "로그인 실패",
        "login.invalid": "아이디 또는 비밀번호가 올바르지 않습니다",
        "login.generic": "로그인에 실패했습니다",
        "register.success": "회원가입 성공",
        "register.created": "계정이 성공적으로 생성되었습니다.",
        "register.failure": "회원가입 실패",
        "logout.success": "로그아웃 되었습니다",
        "logout.failure": "로그아웃 실패",

        "patients.create.success": "환자 등록 성공",
        "patients.create.detail": "{name}님이 등록되었습니다.",
        "patients.create.failure": "환자 등록 실패",
        "patients.update.success": "환자 정보 업데이트 성공",
        "patients.update.detail": "{name}님의 정보가 수정되었습니다.",
        "patients.update.failure": "환자 정보 업데이트 실패",
        "patients.delete.success": "환자 삭제 성공",
        "patients.delete.detail": "환자가 삭제되었습니다.",
        "patients.delete.failure": "환자 삭제 실패",

        "guardians.create.success": "보호자 등록 성공",
        "guardians.create.detail": "{name}님이 등록되었습니다.",
        "guardians.create.failure": "보호자 등록 실패",
        "guardians.update.success": "보호자 정보 업데이트 성공",
        "guardians.update.detail": "{name}님의 정보가 수정되었습니다.",
        "guardians.update.failure": "보호자 정보 업데이트 실패",
        "guardians.delete.success": "보호자 삭제 성공",
        "guardians.delete.detail": "보호자가 삭제되었습니다.",
        "guardians.delete.failure": "보호자 삭제 실패",

        "accidents.create.success": "사고 등록 성공",
        "accidents.create.detail": "사고가 등록되었습니다.",
        "accidents.create.failure": "사고 등록 실패",
        "accidents.update.success": "사고 정보 업데이트 성공",
        "accidents.update.detail": "사고 정보가 수정되었습니다.",
        "accidents.update.failure": "사고 정보 업데이트 실패",
        "accidents.delete.success": "사고 삭제 성공",
        "accidents.delete.detail": "사고가 삭제되었습니다.",
        "accidents.delete.failure": "사고 삭제 실패",

        "cameras.create.success": "카메라 등록 성공",
        "cameras.create.detail": "{name}이(가) 등록되었습니다.",
        "cameras.create.failure": "카메라 등록 실패",
        "cameras.update.success": "카메라 정보 업데이트 성공",
        "cameras.update.detail": "{name}의 정보가 수정되었습니다.",
        "cameras.update.failure": "카메라 정보 업데이트 실패",
        "cameras.delete.success": "카메라 삭제 성공",
        "cameras.delete.detail": "카메라가 삭제되었습니다.",
        "cameras.delete.failure": "카메라 삭제 실패",

        "messages.create.success": "메시지 전송 성공",
        "messages.create.detail": "메시지가 전송되었습니다.",
        "messages.create.failure": "메시지 전송 실패",
        "messages.update.success": "메시지 업데이트 성공",
        "messages.update.detail": "메시지가 수정되었습니다.",
        "messages.update.failure": "메시지 업데이트 실패",
        "messages.delete.success": "메시지 삭제 성공",
        "messages.delete.detail": "메시지가 삭제되었습니다.",
        "messages.delete.failure": "메시지 삭제 실패",

        "users.create.success": "계정 생성 성공",
        "users.create.detail": "{name}님의 계정이 생성되었습니다.",
        "users.create.failure": "계정 생성 실패",
        "users.update.success": "계정 정보 업데이트 성공",
        "users.update.detail": "{name}님의 정보가 수정되었습니다.",
        "users.update.failure": "계정 정보 업데이트 실패",
        "users.delete.success": "계정 삭제 성공",
        "users.delete.detail": "계정이 삭제되었습니다.",
        "users.delete.failure": "계정 삭제 실패",

        "rooms.create.success": "병실 등록 성공",
        "rooms.create.detail": "{name}이(가) 등록되었습니다.",
        "rooms.create.failure": "병실 등록 실패",
        "rooms.update.success": "병실 정보 업데이트 성공",
        "rooms.update.detail": "{name}의 정보가 수정되었습니다.",
        "rooms.update.failure": "병실 정보 업데이트 실패",
        "rooms.delete.success": "병실 삭제 성공",
        "rooms.delete.detail": "병실이 삭제되었습니다.",
        "rooms.delete.failure": "병실 삭제 실패",

        "env_logs.create.success": "환경 기록 등록 성공",
        "env_logs.create.detail": "환경 기록이 등록되었습니다.",
        "env_logs.create.failure": "환경 기록 등록 실패",
        "env_logs.update.success": "환경 기록 업데이트 성공",
        "env_logs.update.detail": "환경 기록이 수정되었습니다.",
        "env_logs.update.failure": "환경 기록 업데이트 실패",
        "env_logs.delete.success": "환경 기록 삭제 성공",
        "env_logs.delete.detail": "환경 기록이 삭제되었습니다.",
        "env_logs.delete.failure": "환경 기록 삭제 실패",

        "role.director": "병원장",
        "role.nurse": "간호사",
        "role.patient": "환자",
        "role.guardian": "보호자",
    },
    "en": {
        "login.success": "Signed in",
        "login.welcome": "Welcome, {name}!",
        "login.failure": "Sign-in failed",
        "login.invalid": "Incorrect username or password",
        "login.generic": "Could not sign in",
        "register.success": "Registration complete",
        "register.created": "Your account has been created.",
        "register.failure": "Registration failed",
        "logout.success": "Signed out",
        "logout.failure": "Sign-out failed",

        "patients.create.success": "Patient registered",
        "patients.create.detail": "{name} has been registered.",
        "patients.create.failure": "Could not register patient",
        "patients.update.success": "Patient updated",
        "patients.update.detail": "{name}'s details were updated.",
        "patients.update.failure": "Could not update patient",
        "patients.delete.success": "Patient removed",
        "patients.delete.detail": "The patient was removed.",
        "patients.delete.failure": "Could not remove patient",

        "guardians.create.success": "Guardian registered",
        "guardians.create.detail": "{name} has been registered.",
        "guardians.create.failure": "Could not register guardian",
        "guardians.update.success": "Guardian updated",
        "guardians.update.detail": "{name}'s details were updated.",
        "guardians.update.failure": "Could not update guardian",
        "guardians.delete.success": "Guardian removed",
        "guardians.delete.detail": "The guardian was removed.",
        "guardians.delete.failure": "Could not remove guardian",

        "accidents.create.success": "Accident recorded",
        "accidents.create.detail": "The accident was recorded.",
        "accidents.create.failure": "Could not record accident",
        "accidents.update.success": "Accident updated",
        "accidents.update.detail": "The accident record was updated.",
        "accidents.update.failure": "Could not update accident",
        "accidents.delete.success": "Accident removed",
        "accidents.delete.detail": "The accident record was removed.",
        "accidents.delete.failure": "Could not remove accident",

        "cameras.create.success": "Camera added",
        "cameras.create.detail": "{name} has been added.",
        "cameras.create.failure": "Could not add camera",
        "cameras.update.success": "Camera updated",
        "cameras.update.detail": "{name} was updated.",
        "cameras.update.failure": "Could not update camera",
        "cameras.delete.success": "Camera removed",
        "cameras.delete.detail": "The camera was removed.",
        "cameras.delete.failure": "Could not remove camera",

        "messages.create.success": "Message sent",
        "messages.create.detail": "Your message was sent.",
        "messages.create.failure": "Could not send message",
        "messages.update.success": "Message updated",
        "messages.update.detail": "The message was updated.",
        "messages.update.failure": "Could not update message",
        "messages.delete.success": "Message deleted",
        "messages.delete.detail": "The message was deleted.",
        "messages.delete.failure": "Could not delete message",

        "users.create.success": "Account created",
        "users.create.detail": "An account for {name} was created.",
        "users.create.failure": "Could not create account",
        "users.update.success": "Account updated",
        "users.update.detail": "{name}'s account was updated.",
        "users.update.failure": "Could not update account",
        "users.delete.success": "Account removed",
        "users.delete.detail": "The account was removed.",
        "users.delete.failure": "Could not remove account",

        "rooms.create.success": "Room added",
        "rooms.create.detail": "{name} has been added.",
        "rooms.create.failure": "Could not add room",
        "rooms.update.success": "Room updated",
        "rooms.update.detail": "{name} was updated.",
        "rooms.update.failure": "Could not update room",
        "rooms.delete.success": "Room removed",
        "rooms.delete.detail": "The room was removed.",
        "rooms.delete.failure": "Could not remove room",

        "env_logs.create.success": "Reading recorded",
        "env_logs.create.detail": "The environment reading was recorded.",
        "env_logs.create.failure": "Could not record reading",
        "env_logs.update.success": "Reading updated",
        "env_logs.update.detail": "The environment reading was updated.",
        "env_logs.update.failure": "Could not update reading",
        "env_logs.delete.success": "Reading removed",
        "env_logs.delete.detail": "The environment reading was removed.",
        "env_logs.delete.failure": "Could not remove reading",

        "role.director": "Director",
        "role.nurse": "Nurse",
        "role.patient": "Patient",
        "role.guardian": "Guardian",
    },
}


def translate(key: str, language: str = "ko", **params) -> str:
    catalogue = MESSAGES.get(language) or MESSAGES["ko"]
    template = catalogue.get(key) or MESSAGES["ko"].get(key, key)
    return template.format(**params) if params else template
