from datetime import datetime
import traceback

import streamlit as st

from pointage.dates import current_week, generate_holidays, month_weeks, next_month, previous_month
from pointage.formatting import format_month_year, format_week_label
from pointage.log import setup_logger
from pointage.settings import settings
from pointage.tables import holidays_frame, month_grid_frame

setup_logger(settings.log_level, settings.log_file)

st.set_page_config(page_title='Calendrier et jours fériés')
st.title('Calendrier de pointage')

try:
    now = datetime.now()
    week = current_week()
    st.write(format_week_label(week.week_number, week.year))

    year = st.number_input('Année :', value=now.year, min_value=settings.week_min_year, max_value=settings.week_max_year, step=1)
    month = st.selectbox('Mois :', options=list(range(12)), index=now.month - 1, format_func=lambda m: format_month_year(m, year))

    prev_m, prev_y = previous_month(month, year)
    next_m, next_y = next_month(month, year)
    st.caption(f'Précédent : {format_month_year(prev_m, prev_y)} · Suivant : {format_month_year(next_m, next_y)}')

    holidays = generate_holidays(year)
    st.subheader(format_month_year(month, year))
    st.table(month_grid_frame(month, year, holidays))
    weeks = month_weeks(month, year)
    st.caption(f'{len(weeks)} semaines, du {weeks[0].week_start:%d/%m/%Y} au {weeks[-1].week_end:%d/%m/%Y}')

    if st.button('Calculer les jours fériés'):
        st.table(holidays_frame(year))
except Exception as e:
    st.error(f'Error executing code: {e}.')
    st.error(f'{traceback.format_exc()}')
