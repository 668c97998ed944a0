from lottery_api.models.lottery_record import MAX_HISTORY, HistoricalDraw, LotteryRecord, PrizeDivision

__all__ = ["MAX_HISTORY", "HistoricalDraw", "LotteryRecord", "PrizeDivision"]
