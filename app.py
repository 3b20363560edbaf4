import streamlit as st
import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import logging
from typing import Callable, Dict, List, Optional, Any

from smartcare.client import SmartCareClient
from smartcare.config import Config
from smartcare.errors import ApiError
from smartcare.i18n import SUPPORTED_LANGUAGES, translate
from smartcare.models import Record, UserRole
from smartcare.routing import Admission

# Configure logging
logging.basicConfig(level=getattr(logging, Config.app.log_level.upper(), logging.INFO))
logger = logging.getLogger(__name__)

FALL_RISK_OPTIONS = ["low", "medium", "high"]


def attempt(action: Callable[[], Any]) -> Optional[Any]:
    """Run a mutation; failures are already shown as notifications"""
    try:
        return action()
    except (ApiError, ValueError) as e:
        logger.info(f"Mutation failed: {e}")
        return None


def records_frame(records: List[Record]) -> pd.DataFrame:
    """Build a display table from API records"""
    return pd.DataFrame([record.to_payload() for record in records])


def role_label(role: str, language: str) -> str:
    return translate(f"role.{role}", language)


# UI Components
class AuthUI:
    """Login and registration page"""

    def __init__(self, client: SmartCareClient):
        self.client = client

    def display(self):
        """Display login / register tabs"""
        st.title("🔐 Smart Care")
        st.caption("Hospital monitoring system")

        tab1, tab2 = st.tabs(["Login", "Register"])
        with tab1:
            self._login_form()
        with tab2:
            self._register_form()

    def _login_form(self):
        """Login form"""
        with st.form("login_form"):
            username = st.text_input("Username", key="login_username")
            password = st.text_input("Password", type="password", key="login_password")

            if st.form_submit_button("Login", use_container_width=True):
                if not username or not password:
                    st.error("Please enter both username and password")
                    return
                if attempt(lambda: self.client.auth.login(username, password)):
                    st.rerun()

    def _register_form(self):
        """Registration form"""
        with st.form("register_form"):
            username = st.text_input("Username")
            email = st.text_input("Email")
            password = st.text_input("Password", type="password")
            confirm_password = st.text_input("Confirm Password", type="password")
            name = st.text_input("Full Name")
            role = st.selectbox("Role", list(UserRole.ALL), index=1)
            language = st.selectbox("Language", list(SUPPORTED_LANGUAGES))

            if st.form_submit_button("Register", use_container_width=True):
                if not all([username, email, password, name]):
                    st.error("Please fill all fields")
                    return
                if password != confirm_password:
                    st.error("Passwords do not match")
                    return

                user_data = {
                    'username': username,
                    'email': email,
                    'password': password,
                    'name': name,
                    'role': role,
                    'preferred_language': language,
                }
                if attempt(lambda: self.client.auth.register(user_data)):
                    st.rerun()


class HomeUI:
    """Landing page for signed-in users"""

    def __init__(self, client: SmartCareClient):
        self.client = client

    def display(self):
        st.title("🏥 Hospital Monitoring System")
        st.write("Welcome. This system detects patient falls and monitors the ward environment.")

        col1, col2, col3 = st.columns(3)
        with col1:
            st.subheader("📹 Fall Detection")
            st.write("AI-assisted fall detection for every monitored room.")
        with col2:
            st.subheader("📊 Dashboard")
            st.write("Ward-wide status and patient overview.")
        with col3:
            st.subheader("🌡️ Environment")
            st.write("Room temperature and humidity against thresholds.")


class DashboardUI:
    """Dashboard UI component"""

    def __init__(self, client: SmartCareClient):
        self.client = client

    def display(self):
        """Display main dashboard"""
        st.title("📊 Dashboard Overview")

        patients = self.client.patients.items()
        rooms = self.client.rooms.items()
        accidents = self.client.accidents.items()
        user = self.client.user

        col1, col2, col3, col4 = st.columns(4)
        with col1:
            st.metric("Patients", len(patients))
        with col2:
            st.metric("Rooms", len(rooms))
        with col3:
            st.metric("Open Fall Alerts", len(self.client.accidents.unresolved()))
        with col4:
            st.metric("Unread Messages", len(self.client.messages.unread_for(user.id)))

        col1, col2 = st.columns(2)
        with col1:
            self._display_accidents_by_room(accidents, rooms)
        with col2:
            self._display_fall_risk(patients)

        st.subheader("Recent Falls")
        self._display_recent_accidents(accidents)

    def _display_accidents_by_room(self, accidents, rooms):
        """Bar chart of accident counts per room"""
        st.subheader("🚨 Falls by Room")
        if not accidents:
            st.info("No accidents recorded")
            return
        names = {room.id: room.name for room in rooms}
        frame = pd.DataFrame([
            {'Room': names.get(a.room_id, f"#{a.room_id}"), 'Resolved': a.resolved}
            for a in accidents
        ])
        counts = frame.groupby(['Room', 'Resolved']).size().reset_index(name='Count')
        fig = px.bar(counts, x='Room', y='Count', color='Resolved', barmode='stack')
        st.plotly_chart(fig, use_container_width=True)

    def _display_fall_risk(self, patients):
        """Pie chart of patients per fall-risk level"""
        st.subheader("⚠️ Fall Risk")
        if not patients:
            st.info("No patients registered")
            return
        frame = pd.DataFrame([{'Risk': p.fall_risk or 'low'} for p in patients])
        counts = frame['Risk'].value_counts().reset_index()
        counts.columns = ['Risk', 'Patients']
        fig = go.Figure(go.Pie(labels=counts['Risk'], values=counts['Patients'], hole=0.4))
        st.plotly_chart(fig, use_container_width=True)

    def _display_recent_accidents(self, accidents):
        recent = sorted(accidents, key=lambda a: a.id, reverse=True)[:10]
        if recent:
            st.dataframe(records_frame(recent), use_container_width=True)
        else:
            st.info("No recent activity")


class FallDetectionUI:
    """Fall accident list and resolution"""

    def __init__(self, client: SmartCareClient):
        self.client = client

    def display(self):
        st.title("📹 Fall Detection")

        result = self.client.accidents.list()
        if result.error:
            st.error(f"Could not load accidents: {result.error.message}")
            return

        tab1, tab2 = st.tabs(["Open Alerts", "History"])
        with tab1:
            self._display_open_alerts()
        with tab2:
            accidents = result.data or []
            if accidents:
                st.dataframe(records_frame(accidents), use_container_width=True)
            else:
                st.info("No accidents recorded")

        if self.client.user.is_staff:
            self._record_accident_form()

    def _display_open_alerts(self):
        unresolved = self.client.accidents.unresolved()
        if not unresolved:
            st.success("No open fall alerts")
            return
        patients = {p.id: p for p in self.client.patients.items()}
        for accident in unresolved:
            patient = patients.get(accident.patient_id)
            label = patient.name if patient else f"Patient #{accident.patient_id}"
            col1, col2 = st.columns([4, 1])
            with col1:
                when = accident.date.strftime('%Y-%m-%d %H:%M') if accident.date else "-"
                st.warning(f"**{label}** fell in room #{accident.room_id} at {when}")
            with col2:
                if st.button("Resolve", key=f"resolve_{accident.id}"):
                    if attempt(lambda: self.client.accidents.resolve(accident.id, self.client.user.id)):
                        st.rerun()

    def _record_accident_form(self):
        st.subheader("Record Fall")
        patients = self.client.patients.items()
        if not patients:
            st.info("Register a patient first")
            return
        with st.form("accident_form", clear_on_submit=True):
            patient = st.selectbox("Patient", patients, format_func=lambda p: p.name)
            if st.form_submit_button("Record", use_container_width=True):
                data = {'patient_id': patient.id, 'room_id': patient.room_id}
                if attempt(lambda: self.client.accidents.create(data)):
                    st.rerun()


class EnvironmentUI:
    """Room temperature and humidity monitoring"""

    def __init__(self, client: SmartCareClient):
        self.client = client

    def display(self):
        st.title("🌡️ Environment Monitoring")

        rooms = self.client.rooms.items()
        if not rooms:
            st.info("No rooms configured")
            return

        data = []
        for room in rooms:
            data.append({
                'Room': room.name,
                'Temp (°C)': room.current_temp,
                'Temp Limit': room.temp_threshold,
                'Humidity (%)': room.current_humidity,
                'Humidity Limit': room.humidity_threshold,
                'Alert': "⚠️" if self.client.rooms.is_out_of_range(room) else "",
            })
        st.dataframe(pd.DataFrame(data), use_container_width=True)

        room = st.selectbox("Room history", rooms, format_func=lambda r: r.name)
        logs = [log for log in self.client.env_logs.items() if log.room_id == room.id and log.timestamp]
        if not logs:
            st.info("No readings for this room")
            return

        frame = pd.DataFrame([
            {'Time': log.timestamp, 'Temperature': log.temperature, 'Humidity': log.humidity}
            for log in sorted(logs, key=lambda log: log.timestamp)
        ])
        fig = go.Figure()
        fig.add_trace(go.Scatter(x=frame['Time'], y=frame['Temperature'], name='Temperature',
                                 line=dict(color='red', width=2)))
        fig.add_trace(go.Scatter(x=frame['Time'], y=frame['Humidity'], name='Humidity',
                                 line=dict(color='blue', width=2), yaxis='y2'))
        fig.update_layout(
            title=f'{room.name} readings',
            yaxis=dict(title='°C'),
            yaxis2=dict(title='%', overlaying='y', side='right'),
            hovermode='x unified'
        )
        st.plotly_chart(fig, use_container_width=True)


class PatientDetailUI:
    """Single patient view"""

    def __init__(self, client: SmartCareClient, patient_id: str):
        self.client = client
        self.patient_id = patient_id

    def display(self):
        try:
            patient = self.client.patients.get(int(self.patient_id))
        except ValueError:
            patient = None
        if patient is None:
            st.error("Patient not found")
            return

        st.title(f"🧑‍⚕️ {patient.name}")
        col1, col2, col3, col4 = st.columns(4)
        with col1:
            st.metric("Age", patient.age)
        with col2:
            st.metric("Room", patient.room_id or "-")
        with col3:
            st.metric("Bed", patient.bed_number or "-")
        with col4:
            st.metric("Fall Risk", patient.fall_risk or "-")

        st.subheader("Guardians")
        guardians = self.client.guardians.for_patient(patient.id)
        if guardians:
            st.dataframe(records_frame(guardians), use_container_width=True)
        else:
            st.info("No guardians registered")

        st.subheader("Fall History")
        falls = [a for a in self.client.accidents.items() if a.patient_id == patient.id]
        if falls:
            st.dataframe(records_frame(falls), use_container_width=True)
        else:
            st.info("No falls recorded")

        if patient.room_id:
            st.subheader("Room Cameras")
            cameras = [c for c in self.client.cameras.items() if c.room_id == patient.room_id]
            for camera in cameras:
                status = "🟢" if camera.active else "⚪"
                st.write(f"{status} **{camera.name}** {camera.stream_url or ''}")


class MyPageUI:
    """Signed-in user's own details"""

    def __init__(self, client: SmartCareClient):
        self.client = client

    def display(self):
        user = self.client.user
        language = self.client.auth.language()
        st.title("👤 My Page")
        st.write(f"**Name:** {user.name}")
        st.write(f"**Username:** {user.username}")
        st.write(f"**Email:** {user.email}")
        st.write(f"**Role:** {role_label(user.role, language)}")

        if user.role == UserRole.PATIENT:
            mine = [p for p in self.client.patients.items() if p.user_id == user.id]
            if mine:
                st.subheader("My Record")
                st.dataframe(records_frame(mine), use_container_width=True)
        elif user.role == UserRole.GUARDIAN:
            links = [g for g in self.client.guardians.items() if g.user_id == user.id]
            for link in links:
                patient = self.client.patients.get(link.patient_id)
                if patient:
                    st.write(f"Guardian of **{patient.name}** (room #{patient.room_id})")


class AccountsUI:
    """Account management for directors and nurses"""

    def __init__(self, client: SmartCareClient):
        self.client = client

    def display(self):
        st.title("👥 Account Management")

        result = self.client.users.list()
        if result.error:
            st.error(f"Could not load accounts: {result.error.message}")
            return

        users = result.data or []
        if users:
            frame = records_frame(users).drop(columns=['fcmToken'], errors='ignore')
            st.dataframe(frame, use_container_width=True)

        tab1, tab2 = st.tabs(["Create Account", "Remove Account"])
        with tab1:
            self._create_form()
        with tab2:
            self._remove_form(users)

    def _create_form(self):
        with st.form("account_form", clear_on_submit=True):
            username = st.text_input("Username")
            email = st.text_input("Email")
            password = st.text_input("Password", type="password")
            name = st.text_input("Full Name")
            role = st.selectbox("Role", list(UserRole.ALL))
            if st.form_submit_button("Create", use_container_width=True):
                if not all([username, email, password, name]):
                    st.error("Please fill all fields")
                    return
                data = {'username': username, 'email': email, 'password': password,
                        'name': name, 'role': role}
                if attempt(lambda: self.client.users.create(data)):
                    st.rerun()

    def _remove_form(self, users):
        others = [u for u in users if u.id != self.client.user.id]
        if not others:
            st.info("No other accounts")
            return
        target = st.selectbox("Account", others, format_func=lambda u: f"{u.name} ({u.username})")
        if st.button("Remove", key="remove_account"):
            attempt(lambda: self.client.users.delete(target.id))
            st.rerun()


class RoomManagementUI:
    """Rooms, patients, guardians and cameras for staff"""

    def __init__(self, client: SmartCareClient):
        self.client = client

    def display(self):
        st.title("🛏️ Room Management")

        tab1, tab2, tab3, tab4 = st.tabs(["Rooms", "Patients", "Guardians", "Cameras"])
        with tab1:
            self._rooms()
        with tab2:
            self._patients()
        with tab3:
            self._guardians()
        with tab4:
            self._cameras()

    def _rooms(self):
        rooms = self.client.rooms.items()
        for room in rooms:
            with st.expander(f"{room.name} ({len(self.client.patients.in_room(room.id))} patients)"):
                with st.form(f"room_form_{room.id}"):
                    temp = st.number_input("Temperature limit", value=float(room.temp_threshold or 26.0),
                                           key=f"room_temp_{room.id}")
                    humidity = st.number_input("Humidity limit", value=float(room.humidity_threshold or 60.0),
                                               key=f"room_humidity_{room.id}")
                    col1, col2 = st.columns(2)
                    with col1:
                        save = st.form_submit_button("Save")
                    with col2:
                        remove = st.form_submit_button("Delete")
                    if save:
                        attempt(lambda: self.client.rooms.update(
                            room.id, {'temp_threshold': temp, 'humidity_threshold': humidity}))
                        st.rerun()
                    if remove:
                        attempt(lambda: self.client.rooms.delete(room.id))
                        st.rerun()

        with st.form("new_room_form", clear_on_submit=True):
            st.subheader("Add Room")
            name = st.text_input("Room name")
            temp = st.number_input("Temperature limit", value=26.0, key="new_room_temp")
            humidity = st.number_input("Humidity limit", value=60.0, key="new_room_humidity")
            if st.form_submit_button("Add", use_container_width=True):
                if not name:
                    st.error("Room name is required")
                    return
                data = {'name': name, 'temp_threshold': temp, 'humidity_threshold': humidity}
                if attempt(lambda: self.client.rooms.create(data)):
                    st.rerun()

    def _patients(self):
        patients = self.client.patients.items()
        if patients:
            st.dataframe(records_frame(patients), use_container_width=True)

        rooms = self.client.rooms.items()
        nurses = attempt(lambda: self.client.users.by_role(UserRole.NURSE)) or []
        with st.form("patient_form", clear_on_submit=True):
            st.subheader("Register Patient")
            col1, col2 = st.columns(2)
            with col1:
                name = st.text_input("Patient Name*")
                age = st.number_input("Age*", min_value=0, max_value=120, value=70)
                blood = st.text_input("Blood type")
                fall_risk = st.selectbox("Fall risk", FALL_RISK_OPTIONS)
            with col2:
                room = st.selectbox("Room", [None] + rooms,
                                    format_func=lambda r: r.name if r else "-")
                bed_number = st.number_input("Bed", min_value=0, value=0)
                nurse = st.selectbox("Assigned nurse", [None] + nurses,
                                     format_func=lambda u: u.name if u else "-")
            if st.form_submit_button("Register", use_container_width=True):
                if not name:
                    st.error("Patient name is required")
                    return
                data = {
                    'name': name,
                    'age': int(age),
                    'blood': blood or None,
                    'fall_risk': fall_risk,
                    'room_id': room.id if room else None,
                    'bed_number': int(bed_number) or None,
                    'assigned_nurse_id': nurse.id if nurse else None,
                }
                if attempt(lambda: self.client.patients.create(data)):
                    st.rerun()

        if patients:
            target = st.selectbox("Remove patient", patients, format_func=lambda p: p.name,
                                  key="remove_patient_select")
            if st.button("Remove patient"):
                attempt(lambda: self.client.patients.delete(target.id))
                st.rerun()

    def _guardians(self):
        guardians = self.client.guardians.items()
        if guardians:
            st.dataframe(records_frame(guardians), use_container_width=True)

        patients = self.client.patients.items()
        if not patients:
            st.info("Register a patient first")
            return
        with st.form("guardian_form", clear_on_submit=True):
            st.subheader("Register Guardian")
            name = st.text_input("Guardian name")
            tel = st.text_input("Phone")
            patient = st.selectbox("Patient", patients, format_func=lambda p: p.name)
            if st.form_submit_button("Register", use_container_width=True):
                if not name or not tel:
                    st.error("Name and phone are required")
                    return
                data = {'name': name, 'tel': tel, 'patient_id': patient.id}
                if attempt(lambda: self.client.guardians.create(data)):
                    st.rerun()

        if guardians:
            target = st.selectbox("Remove guardian", guardians, format_func=lambda g: g.name,
                                  key="remove_guardian_select")
            if st.button("Remove guardian"):
                attempt(lambda: self.client.guardians.delete(target.id))
                st.rerun()

    def _cameras(self):
        cameras = self.client.cameras.items()
        for camera in cameras:
            col1, col2 = st.columns([4, 1])
            with col1:
                st.write(f"{'🟢' if camera.active else '⚪'} **{camera.name}** room #{camera.room_id}")
            with col2:
                label = "Disable" if camera.active else "Enable"
                if st.button(label, key=f"camera_toggle_{camera.id}"):
                    attempt(lambda: self.client.cameras.update(camera.id, {'active': not camera.active}))
                    st.rerun()

        rooms = self.client.rooms.items()
        if not rooms:
            return
        with st.form("camera_form", clear_on_submit=True):
            st.subheader("Add Camera")
            name = st.text_input("Camera name")
            stream_url = st.text_input("Stream URL")
            room = st.selectbox("Room", rooms, format_func=lambda r: r.name)
            if st.form_submit_button("Add", use_container_width=True):
                if not name:
                    st.error("Camera name is required")
                    return
                data = {'name': name, 'stream_url': stream_url or None, 'room_id': room.id}
                if attempt(lambda: self.client.cameras.create(data)):
                    st.rerun()


class MessagesUI:
    """Messages between guardians and nurses"""

    def __init__(self, client: SmartCareClient):
        self.client = client

    def display(self):
        st.title("💬 Messages")
        user = self.client.user

        result = self.client.messages.list()
        if result.error:
            st.error(f"Could not load messages: {result.error.message}")
            return

        contacts = self._contacts()
        if contacts:
            other = st.selectbox("Conversation with", contacts, format_func=lambda u: u.name)
            for message in self.client.messages.conversation(user.id, other.id):
                mine = message.sender_id == user.id
                with st.chat_message("user" if mine else "assistant"):
                    st.write(message.message)
                    if not mine and not message.read:
                        if st.button("Mark as read", key=f"read_{message.id}"):
                            attempt(lambda: self.client.messages.mark_read(message.id))
                            st.rerun()
            receiver_id = other.id
        else:
            receiver_id = st.number_input("Recipient ID", min_value=1, step=1)

        with st.form("message_form", clear_on_submit=True):
            text = st.text_area("Message")
            if st.form_submit_button("Send", use_container_width=True):
                if not text.strip():
                    st.error("Message is empty")
                    return
                data = {'sender_id': user.id, 'receiver_id': int(receiver_id), 'message': text.strip()}
                if attempt(lambda: self.client.messages.create(data)):
                    st.rerun()

    def _contacts(self):
        result = self.client.users.list()
        if result.error:
            return []
        return [u for u in result.data or [] if u.id != self.client.user.id]


class SettingsUI:
    """Per-user preferences"""

    def __init__(self, client: SmartCareClient):
        self.client = client

    def display(self):
        st.title("⚙️ Settings")
        user = self.client.user
        current = user.preferred_language if user.preferred_language in SUPPORTED_LANGUAGES else "ko"
        with st.form("settings_form"):
            language = st.selectbox("Language", list(SUPPORTED_LANGUAGES),
                                    index=SUPPORTED_LANGUAGES.index(current))
            if st.form_submit_button("Save", use_container_width=True):
                if attempt(lambda: self.client.users.update(user.id, {'preferred_language': language})):
                    self.client.auth.fetch_user()
                    st.rerun()


class SmartCareApp:
    """Main Smart Care Monitoring Application"""

    def __init__(self):
        self.setup_page_config()
        self.client = self.get_client()

    def setup_page_config(self):
        """Setup Streamlit page configuration"""
        st.set_page_config(
            page_title=Config.app.page_title,
            page_icon=Config.app.page_icon,
            layout=Config.app.layout,
            initial_sidebar_state="expanded"
        )

    def get_client(self) -> SmartCareClient:
        """One client per browser session"""
        if 'client' not in st.session_state:
            st.session_state.client = SmartCareClient()
            logger.info("Client created for new browser session")
        return st.session_state.client

    def run(self):
        """Main application runner"""
        try:
            self.client.start()

            # Toasts queued before a rerun are shown on the next run.
            self.render_notifications()
            self.render_sidebar()
            self.render_route()
            self.render_notifications()

        except Exception as e:
            logger.exception(f"Application error: {str(e)}")
            st.error("An unexpected error occurred. Please refresh the page.")

    def render_notifications(self):
        """Render queued notifications as toasts"""
        for notification in self.client.notifier.drain():
            icon = "⚠️" if notification.is_error else "✅"
            text = notification.title
            if notification.description:
                text = f"**{notification.title}** {notification.description}"
            st.toast(text, icon=icon)

    def render_route(self):
        """Render the page for the current location through the access gate"""
        decision = self.client.gate.check(self.client.router.location)

        if decision.admission == Admission.REDIRECT:
            if self.client.router.auto_redirect_to_login():
                st.rerun()
            st.warning("Please sign in to continue.")
            if st.button("Go to sign in"):
                self.client.router.redirect_to_login()
                st.rerun()
        elif decision.admission == Admission.DENY:
            st.error("Access denied. You are not authorised to view this page.")
        elif decision.admission == Admission.NOT_FOUND:
            st.title("404 Page Not Found")
            st.write("The page you are looking for does not exist.")
        else:
            self.pages(decision.params or {})[decision.route.name]()

    def pages(self, params: Dict[str, str]) -> Dict[str, Callable[[], None]]:
        client = self.client
        return {
            "auth": AuthUI(client).display,
            "home": HomeUI(client).display,
            "dashboard": DashboardUI(client).display,
            "fall_detection": FallDetectionUI(client).display,
            "environment": EnvironmentUI(client).display,
            "patient_detail": PatientDetailUI(client, params.get('id', '')).display,
            "mypage": MyPageUI(client).display,
            "accounts": AccountsUI(client).display,
            "room_management": RoomManagementUI(client).display,
            "messages": MessagesUI(client).display,
            "settings": SettingsUI(client).display,
        }

    def nav_button(self, label: str, path: str):
        active = self.client.router.location == path
        if st.sidebar.button(label, use_container_width=True, type="primary" if active else "secondary"):
            self.client.router.navigate(path)
            st.rerun()

    def render_sidebar(self):
        """Render navigation and user information in the sidebar"""
        user = self.client.user
        if user is None:
            return

        language = self.client.auth.language()
        st.sidebar.title("Smart Care")
        st.sidebar.caption("Hospital management system")

        self.nav_button("🏠 Home", "/")
        self.nav_button("📊 Dashboard", "/dashboard")
        self.nav_button("📹 Fall Detection", "/fall-detection")
        self.nav_button("🌡️ Environment", "/environment")

        if user.is_staff:
            st.sidebar.markdown("---")
            st.sidebar.caption("Rooms & Patients")
            self.nav_button("🛏️ Room Management", "/room-management")
            for room in self.client.rooms.items():
                with st.sidebar.expander(room.name):
                    for patient in self.client.patients.in_room(room.id):
                        if st.button(f"{patient.name} ({patient.fall_risk})", key=f"nav_patient_{patient.id}"):
                            self.client.router.navigate(f"/patients/{patient.id}")
                            st.rerun()

        st.sidebar.markdown("---")
        if user.is_staff:
            self.nav_button("👥 Accounts", "/accounts")
        self.nav_button("👤 My Page", "/mypage")
        self.nav_button("💬 Messages", "/messages")
        self.nav_button("⚙️ Settings", "/settings")

        st.sidebar.markdown("---")
        st.sidebar.success(f"**Logged in as:** {user.name}")
        st.sidebar.write(f"**Role:** {role_label(user.role, language)}")

        if st.sidebar.button("Logout", use_container_width=True):
            attempt(self.client.auth.logout)
            st.rerun()


# Run the application
if __name__ == "__main__":
    app = SmartCareApp()
    app.run()
