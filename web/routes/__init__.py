"""
API 라우트 패키지

각 기능별 라우터 모듈:
- health: 헬스 체크
- accounts: 계정 (/contas)
- transactions: 거래 (/transacoes)
- balance: 잔액 (/saldo)
- reset: 데이터 초기화 (/reset)
"""
