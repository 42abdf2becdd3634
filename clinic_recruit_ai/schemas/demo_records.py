"""Fixed sample records returned when no inference backend is configured."""

DEMO_POSITION_RECORD: dict = {
    "title": "歯科衛生士",
    "employmentType": "FULL_TIME",
    "salaryMin": 280000,
    "salaryMax": 380000,
    "hourlyRateMin": None,
    "hourlyRateMax": None,
    "description": (
        "一般歯科治療における歯科衛生士業務全般\n"
        "・予防歯科処置（スケーリング、PMTC、フッ素塗布）\n"
        "・歯科保健指導\n"
        "・診療補助\n"
        "・口腔内写真撮影"
    ),
    "requirements": "・歯科衛生士免許をお持ちの方\n・臨床経験2年以上の方歓迎\n・ブランクのある方も相談可",
    "benefits": (
        "・社会保険完備\n・交通費支給（月3万円まで）\n・制服貸与\n"
        "・有給休暇\n・研修制度あり\n・退職金制度あり"
    ),
}

DEMO_COMPETITOR_RECORD: dict = {
    "clinicName": "さくら歯科クリニック",
    "address": "東京都渋谷区神宮前1-2-3",
    "website": None,
    "conditions": [
        {
            "jobTitle": "歯科衛生士(常勤)",
            "salaryMin": 280000,
            "salaryMax": 380000,
            "hourlyRateMin": None,
            "hourlyRateMax": None,
            "benefits": "社会保険完備、交通費支給（月3万円まで）、制服貸与、有給休暇、研修制度あり、退職金制度あり",
            "workingHours": "9:00〜18:00（休憩60分）",
            "holidays": "日曜・祝日、水曜午後、夏季休暇、年末年始休暇",
            "source": None,
        },
        {
            "jobTitle": "歯科衛生士(パート)",
            "salaryMin": None,
            "salaryMax": None,
            "hourlyRateMin": 1600,
            "hourlyRateMax": 1600,
            "benefits": "交通費支給、制服貸与、有給休暇",
            "workingHours": "9:00〜13:00 または 14:00〜18:00（応相談）",
            "holidays": "シフト制、日曜・祝日休み",
            "source": None,
        },
        {
            "jobTitle": "歯科助手(常勤)",
            "salaryMin": 220000,
            "salaryMax": 280000,
            "hourlyRateMin": None,
            "hourlyRateMax": None,
            "benefits": "社会保険完備、交通費支給、制服貸与、有給休暇、未経験OK",
            "workingHours": "9:00〜18:00（休憩60分）",
            "holidays": "日曜・祝日、水曜午後、夏季休暇、年末年始休暇",
            "source": None,
        },
        {
            "jobTitle": "歯科助手(パート)",
            "salaryMin": None,
            "salaryMax": None,
            "hourlyRateMin": 1200,
            "hourlyRateMax": 1200,
            "benefits": "交通費支給、制服貸与、未経験OK",
            "workingHours": "9:00〜13:00 または 14:00〜18:00（応相談）",
            "holidays": "シフト制、日曜・祝日休み",
            "source": None,
        },
    ],
}
