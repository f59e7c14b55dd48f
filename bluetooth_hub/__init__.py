"""
Bluetooth Hub - 페어링된 장치 조회 및 웨어러블/헬스 장치 분류
"""
