"""Extraction instructions sent ahead of the page text, one per extraction schema."""

POSITION_PROMPT_TEMPLATE = """以下は求人媒体の募集ページから取得したHTMLテキストです。
この求人情報から以下のJSON形式で情報を抽出してください。
読み取れない項目はnullとしてください。
必ず有効なJSONオブジェクトを1つだけ返してください。説明文やコメントは不要です。

{
  "title": "職種名（例: 看護師、歯科衛生士、医療事務）",
  "employmentType": "FULL_TIME または PART_TIME または CONTRACT（常勤・正社員=FULL_TIME、パート・アルバイト=PART_TIME、契約社員=CONTRACT）",
  "salaryMin": 月給の下限（整数、円単位。例: 250000）または null,
  "salaryMax": 月給の上限（整数、円単位）または null,
  "hourlyRateMin": 時給の下限（整数、円単位。例: 1200）または null,
  "hourlyRateMax": 時給の上限（整数、円単位）または null,
  "description": "仕事内容・業務内容の詳細テキスト",
  "requirements": "応募条件・必要な資格・経験などのテキスト",
  "benefits": "福利厚生・待遇のテキスト"
}

注意:
- 年収が記載されている場合は12で割って月給に変換してください（円未満は四捨五入）
- 給与にカンマや「万円」が含まれている場合は円単位の整数に変換してください（例: 25万円 → 250000）
- パート・アルバイトの場合は hourlyRateMin/Max に時給を入れ、salaryMin/Max は null にしてください
- 常勤・正社員・契約社員の場合は salaryMin/Max に月給を入れ、hourlyRateMin/Max は null にしてください
- 金額が1つだけ記載されている場合は下限と上限の両方に同じ値を入れてください

求人ページのテキスト:
"""

COMPETITOR_PROMPT_TEMPLATE = """以下は医療機関（歯科医院・クリニック・病院）の求人募集ページから取得したテキストです。
この求人情報から、医院名と募集条件を抽出してください。

複数の職種（歯科衛生士、歯科助手、歯科医師、看護師、医療事務など）や
複数の勤務形態（正社員/常勤、パート・アルバイト）が掲載されている場合は、
職種と勤務形態の組み合わせごとに個別のエントリとして抽出してください。まとめないでください。

必ず有効なJSONオブジェクトを1つだけ返してください。説明文やコメントは不要です。

{
  "clinicName": "医院名・クリニック名",
  "address": "住所（わかれば）またはnull",
  "website": "公式サイトURL（わかれば）またはnull",
  "conditions": [
    {
      "jobTitle": "職種名（例: 歯科衛生士(常勤)、歯科助手(パート)）",
      "salaryMin": 月給下限（整数、円単位）またはnull,
      "salaryMax": 月給上限（整数、円単位）またはnull,
      "hourlyRateMin": 時給下限（整数、円単位、パート・アルバイトの場合）またはnull,
      "hourlyRateMax": 時給上限（整数、円単位、パート・アルバイトの場合）またはnull,
      "benefits": "福利厚生・待遇（テキスト）",
      "workingHours": "勤務時間（テキスト）",
      "holidays": "休日・休暇（テキスト）",
      "source": "掲載媒体名（例: ジョブメドレー、公式サイト。わからなければnull）"
    }
  ]
}

注意:
- 同じ職種でも正社員とパートで条件が異なる場合は別エントリにしてください
- jobTitleには勤務形態も含めてください（例: "歯科衛生士(常勤)", "歯科衛生士(パート)"）
- 年収が記載されている場合は12で割って月給に変換してください（円未満は四捨五入）
- 給与に「万円」が含まれている場合は円単位の整数に変換してください（例: 25万円 → 250000）
- パート・アルバイトの場合はhourlyRateMin/Maxに時給を入れ、salaryMin/Maxはnullにしてください
- 正社員・常勤の場合はsalaryMin/Maxに月給を入れ、hourlyRateMin/Maxはnullにしてください
- 読み取れない項目はnullとしてください

求人ページのテキスト:
"""
